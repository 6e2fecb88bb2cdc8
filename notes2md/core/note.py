"""Source-independent note model for notes2md."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property


def derive_title(content: str) -> str:
    """Derive a note title from the first line of its content.

    Leading markdown heading markers and surrounding whitespace are removed.
    An empty result is returned as the empty string.

    Args:
        content: Raw note body.

    Returns:
        The derived title, possibly empty.
    """
    first_line = content.split("\n", 1)[0]
    return first_line.strip().lstrip("#").strip()


@dataclass(frozen=True)
class Note:
    """A single note decoded from an export."""

    content: str
    created: str
    modified: str
    trashed: bool = False
    pinned: bool = False
    tags: tuple[str, ...] = field(default_factory=tuple)

    @cached_property
    def title(self) -> str:
        return derive_title(self.content)
