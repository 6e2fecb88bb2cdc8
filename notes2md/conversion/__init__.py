"""Conversion of decoded notes for notes2md.

This module turns decoded notes into named markdown documents and writes
them into a destination directory.
"""

from .processor import ConversionReport, ConvertedNote, FailedNote, convert_notes
from .writer import WriteOutcome, increment_path_if_exists, write_converted

__all__ = [
    "ConversionReport",
    "ConvertedNote",
    "WriteOutcome",
    "FailedNote",
    "convert_notes",
    "increment_path_if_exists",
    "write_converted",
]
