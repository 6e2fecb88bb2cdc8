"""Shared export decoder interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..core.note import Note


@dataclass
class DecodedExport:
    """Notes decoded from one export, with per-sequence counters."""

    notes: list[Note] = field(default_factory=list)
    active_count: int = 0
    trashed_count: int = 0


class ExportDecoder(ABC):
    """Decode a note export into source-independent notes."""

    name: str = "export"

    @abstractmethod
    def decode(self) -> DecodedExport:
        """Decode the whole export.

        Returns:
            Active notes followed by trashed notes, in source order.

        Raises:
            DecodeError: If the export is structurally invalid.
        """
