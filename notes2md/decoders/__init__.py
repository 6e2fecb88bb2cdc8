"""Export decoders for notes2md.

A file source is read as a Simplenote JSON export, a directory source as an
Apple Notes iCloud export.
"""

from __future__ import annotations

from pathlib import Path

from ..exceptions import DecodeError
from .applenotes import AppleNotesDecoder
from .base import DecodedExport, ExportDecoder
from .simplenote import SimplenoteDecoder, note_from_record


def decoder_for_source(source_path: Path | str) -> ExportDecoder:
    """Pick the decoder matching the kind of source path.

    Raises:
        DecodeError: If the path is neither a file nor a directory.
    """
    source_path = Path(source_path)
    if source_path.is_dir():
        return AppleNotesDecoder(source_path)
    if source_path.is_file():
        return SimplenoteDecoder.from_path(source_path)
    raise DecodeError(f"source_path: '{source_path}' is not a file or directory")


__all__ = [
    "AppleNotesDecoder",
    "DecodedExport",
    "ExportDecoder",
    "SimplenoteDecoder",
    "decoder_for_source",
    "note_from_record",
]
