"""Apple Notes iCloud export decoding."""

from __future__ import annotations

from pathlib import Path

from ..exceptions import DecodeError
from .base import DecodedExport, ExportDecoder


class AppleNotesDecoder(ExportDecoder):
    """Decode an iCloud Apple Notes export directory.

    The directory layout of the export has not been mapped yet, so decoding
    is not available. The decoder still validates its input so callers get
    the same errors as for other sources.
    """

    name = "Apple Notes"

    def __init__(self, path: Path | str):
        self.path = Path(path)
        if not self.path.exists():
            raise DecodeError(f"Apple Notes export not found: {self.path}")
        if not self.path.is_dir():
            raise DecodeError(f"Apple Notes export must be a directory: {self.path}")

    def decode(self) -> DecodedExport:
        # TODO: decode the iCloud export layout once real export samples are collected.
        raise NotImplementedError("Apple Notes conversion is not yet implemented")
