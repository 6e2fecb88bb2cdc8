"""Simplenote JSON export decoding."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.note import Note
from ..exceptions import DecodeError
from .base import DecodedExport, ExportDecoder

ACTIVE_KEY = "activeNotes"
TRASHED_KEY = "trashedNotes"


def _as_text(value: Any) -> str:
    """Return a record value as text, treating missing values as empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def note_from_record(record: Any, trashed: bool) -> Note:
    """Build a note from one raw Simplenote record.

    Malformed records degrade to empty fields instead of failing.

    Args:
        record: Raw record from the export.
        trashed: Whether the record came from the trash sequence.

    Returns:
        The decoded note.
    """
    if not isinstance(record, dict):
        return Note(content="", created="", modified="", trashed=trashed)

    content = record.get("content")
    if not isinstance(content, str):
        content = ""

    system_tags = record.get("systemTags")
    pinned = record.get("pinned") is True or (
        isinstance(system_tags, list) and "pinned" in system_tags
    )

    raw_tags = record.get("tags")
    tags: tuple[str, ...] = ()
    if isinstance(raw_tags, list):
        tags = tuple(tag for tag in raw_tags if isinstance(tag, str))

    return Note(
        content=content,
        created=_as_text(record.get("creationDate")),
        modified=_as_text(record.get("lastModified")),
        trashed=trashed,
        pinned=pinned,
        tags=tags,
    )


class SimplenoteDecoder(ExportDecoder):
    """Decode a Simplenote ``notes.json`` export."""

    name = "Simplenote"

    def __init__(self, blob: str | bytes):
        self.blob = blob

    @classmethod
    def from_path(cls, path: Path | str) -> SimplenoteDecoder:
        """Read an export file from disk."""
        path = Path(path)
        try:
            return cls(path.read_bytes())
        except OSError as e:
            raise DecodeError(f"Failed to read Simplenote export {path}: {e}") from e

    def _load(self) -> dict[str, Any]:
        try:
            data = json.loads(self.blob)
        except UnicodeDecodeError as e:
            raise DecodeError(f"Simplenote export is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise DecodeError(f"Simplenote export is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError("Simplenote export must be a JSON object")

        for key in (ACTIVE_KEY, TRASHED_KEY):
            if not isinstance(data.get(key), list):
                raise DecodeError(f"Simplenote export is missing the '{key}' list")

        return data

    def decode(self) -> DecodedExport:
        data = self._load()
        active = [note_from_record(r, trashed=False) for r in data[ACTIVE_KEY]]
        trashed = [note_from_record(r, trashed=True) for r in data[TRASHED_KEY]]

        return DecodedExport(
            notes=active + trashed,
            active_count=len(active),
            trashed_count=len(trashed),
        )
