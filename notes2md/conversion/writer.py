"""Writing converted notes into the destination directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger as default_logger

from .processor import ConversionReport, FailedNote


@dataclass
class WriteOutcome:
    """Files written for a report, and notes whose file could not be written."""

    written: list[Path] = field(default_factory=list)
    failed: list[FailedNote] = field(default_factory=list)


def increment_path_if_exists(dest_dir: Path, filename: str, extension: str) -> Path:
    """Return the first free path among ``name.ext``, ``name (1).ext``, ..."""
    candidate = dest_dir / f"{filename}{extension}"
    counter = 0
    while candidate.exists():
        counter += 1
        candidate = dest_dir / f"{filename} ({counter}){extension}"
    return candidate


def write_converted(
    report: ConversionReport,
    extension: str = ".md",
    dry_run: bool = False,
    overwrite: bool = False,
    logger: Any = None,
) -> WriteOutcome:
    """Write every converted note of a report as a UTF-8 file.

    Unless ``overwrite`` is set, existing files are kept and a numbered
    variant of the name is used instead. A note that cannot be written is
    recorded as failed and the remaining notes are still written.

    Args:
        report: Report produced by ``convert_notes``.
        extension: Extension appended to each filename.
        dry_run: If True, only log what would be written.
        overwrite: If True, replace files that already exist.
        logger: Logger instance, defaults to the loguru logger.

    Returns:
        Paths written (or that would be written in a dry run) and write failures.
    """
    logger = logger or default_logger
    outcome = WriteOutcome()

    for result in report.converted:
        if overwrite:
            target = report.dest_dir / f"{result.filename}{extension}"
        else:
            target = increment_path_if_exists(
                report.dest_dir, result.filename, extension
            )

        if dry_run:
            logger.info(f"[DRY RUN] Would write {target.name}")
        else:
            try:
                target.write_text(result.markdown, encoding="utf-8")
            except OSError as e:
                logger.error(f"Error writing {target}: {e}")
                outcome.failed.append(FailedNote(result.note, str(e), result.markdown))
                continue
            logger.debug(f"Wrote {target}")
        outcome.written.append(target)

    return outcome
