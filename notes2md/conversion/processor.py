"""Batch conversion of decoded notes into markdown documents."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger as default_logger

from ..config import Config
from ..core import Note, derive_filename, render_markdown, unique_filename
from ..exceptions import InvalidFilenameError


@dataclass
class ConvertedNote:
    """A note that received a filename and a rendered document."""

    note: Note
    filename: str
    markdown: str


@dataclass
class FailedNote:
    """A note that could not be converted, kept for diagnostics."""

    note: Note
    reason: str
    markdown: str


@dataclass
class ConversionReport:
    """Per-note results of one batch, in source order."""

    dest_dir: Path
    results: list[ConvertedNote | FailedNote] = field(default_factory=list)
    skipped: int = 0

    @property
    def converted(self) -> list[ConvertedNote]:
        return [r for r in self.results if isinstance(r, ConvertedNote)]

    @property
    def failed(self) -> list[FailedNote]:
        return [r for r in self.results if isinstance(r, FailedNote)]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return len(self.converted)

    @property
    def failed_count(self) -> int:
        return len(self.failed)


def convert_notes(
    notes: Iterable[Note],
    dest_dir: Path | str,
    config: Config | None = None,
    logger: Any = None,
) -> ConversionReport:
    """Derive filenames and render markdown for every note of a batch.

    A note whose title cannot become a filename is recorded as a failure
    together with its rendered markdown and the batch continues. Nothing is
    written to disk here.

    Args:
        notes: Decoded notes, in source order.
        dest_dir: Destination directory, passed through to the report.
        config: Optional configuration object.
        logger: Logger instance, defaults to the loguru logger.

    Returns:
        Report holding one result per converted or failed note.
    """
    config = config or Config()
    logger = logger or default_logger
    include_metadata = config.frontmatter.include_metadata
    on_collision = config.output.on_collision

    report = ConversionReport(dest_dir=Path(dest_dir))
    taken: set[str] = set()

    for note in notes:
        if note.trashed and not config.conversion.include_trashed:
            report.skipped += 1
            continue

        markdown = render_markdown(note, include_metadata)

        try:
            filename = derive_filename(note.title)
        except InvalidFilenameError as e:
            logger.debug(f"Skipping note created {note.created or '?'}: {e}")
            report.results.append(FailedNote(note, str(e), markdown))
            continue

        if filename.casefold() in taken:
            if on_collision == "skip":
                reason = f"filename: '{filename}' is already used by another note"
                logger.debug(reason)
                report.results.append(FailedNote(note, reason, markdown))
                continue
            if on_collision == "suffix":
                renamed = unique_filename(filename, taken)
                logger.debug(f"Renamed duplicate '{filename}' -> '{renamed}'")
                filename = renamed

        taken.add(filename.casefold())
        report.results.append(ConvertedNote(note, filename, markdown))

    return report
