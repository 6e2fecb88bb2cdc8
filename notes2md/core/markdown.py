"""Markdown rendering functions for notes2md."""

from __future__ import annotations

from typing import Any

import yaml

from .note import Note


class _QuotedStr(str):
    """String value that is always emitted double-quoted."""


class _FrontmatterDumper(yaml.SafeDumper):
    pass


def _represent_quoted(dumper: yaml.SafeDumper, data: _QuotedStr) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


_FrontmatterDumper.add_representer(_QuotedStr, _represent_quoted)


def build_frontmatter(note: Note, include_metadata: bool = False) -> dict[str, Any]:
    """Build the ordered front matter mapping for a note.

    Args:
        note: The note to describe.
        include_metadata: If True, add ``deleted``, ``pinned`` and ``tags``
            when they carry information.

    Returns:
        Mapping of front matter keys to values, in output order.
    """
    data: dict[str, Any] = {
        "title": _QuotedStr(note.title),
        "created": _QuotedStr(note.created),
        "modified": _QuotedStr(note.modified),
    }

    if include_metadata:
        if note.trashed:
            data["deleted"] = True
        if note.pinned:
            data["pinned"] = True
        if note.tags:
            data["tags"] = [_QuotedStr(tag) for tag in note.tags]

    return data


def render_frontmatter(data: dict[str, Any]) -> str:
    """Convert the data to a delimited YAML front matter block."""
    dumped = yaml.dump(
        data,
        Dumper=_FrontmatterDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )
    return "---\n" + dumped + "---\n"


def render_markdown(note: Note, include_metadata: bool = False) -> str:
    """Serialize a note into front matter followed by its verbatim content."""
    frontmatter = build_frontmatter(note, include_metadata)
    return render_frontmatter(frontmatter) + note.content
