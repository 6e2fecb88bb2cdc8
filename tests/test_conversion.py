"""Tests for batch conversion and writing."""

import tempfile
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

from notes2md.config import Config
from notes2md.conversion import (
    ConvertedNote,
    FailedNote,
    convert_notes,
    increment_path_if_exists,
    write_converted,
)
from notes2md.core import Note, render_markdown


def make_note(content: str, trashed: bool = False) -> Note:
    return Note(
        content=content,
        created="2022-01-13T22:36:18.906Z",
        modified="2022-01-14T07:36:50.656Z",
        trashed=trashed,
    )


class TestConvertNotes:
    """Test the per-note conversion of a batch."""

    def test_single_note(self) -> None:
        note = make_note("# A title\nThis is a\ngreat piece of\nsample content!")
        report = convert_notes([note], "/tmp/out")

        assert report.total == 1
        assert report.succeeded == 1
        assert report.failed_count == 0
        result = report.results[0]
        assert isinstance(result, ConvertedNote)
        assert result.filename == "A title"
        assert result.markdown == render_markdown(note)
        assert report.dest_dir == Path("/tmp/out")

    def test_empty_note_fails_without_aborting(self) -> None:
        notes = [make_note(""), make_note("Second note\nbody")]
        report = convert_notes(notes, "/tmp/out")

        assert report.total == 2
        assert report.succeeded == 1
        assert report.failed_count == 1
        failed = report.results[0]
        assert isinstance(failed, FailedNote)
        assert failed.reason == "title: '' is not valid for a filename"
        assert failed.markdown == render_markdown(notes[0])
        assert report.converted[0].filename == "Second note"

    def test_only_empty_note(self) -> None:
        report = convert_notes([make_note("")], "/tmp/out")
        assert report.failed_count == 1
        assert report.succeeded == 0

    def test_order_preserved(self) -> None:
        notes = [make_note("b"), make_note(""), make_note("a")]
        report = convert_notes(notes, "/tmp/out")
        assert [r.note for r in report.results] == notes

    def test_duplicate_titles_suffixed(self) -> None:
        notes = [make_note("Todo"), make_note("todo\nmore"), make_note("Todo\nagain")]
        report = convert_notes(notes, "/tmp/out")
        assert [r.filename for r in report.converted] == [
            "Todo",
            "todo (1)",
            "Todo (2)",
        ]

    def test_duplicate_titles_skipped(self) -> None:
        config = Config()
        config.output.on_collision = "skip"
        report = convert_notes([make_note("Todo"), make_note("Todo")], "/o", config)

        assert report.succeeded == 1
        assert report.failed_count == 1
        assert "already used" in report.failed[0].reason

    def test_duplicate_titles_overwrite(self) -> None:
        config = Config()
        config.output.on_collision = "overwrite"
        report = convert_notes([make_note("Todo"), make_note("Todo")], "/o", config)
        assert [r.filename for r in report.converted] == ["Todo", "Todo"]

    def test_trashed_notes_skipped_when_excluded(self) -> None:
        config = Config()
        config.conversion.include_trashed = False
        notes = [make_note("Keep"), make_note("Drop", trashed=True)]
        report = convert_notes(notes, "/o", config)

        assert report.total == 1
        assert report.skipped == 1
        assert report.converted[0].filename == "Keep"

    def test_metadata_from_config(self) -> None:
        config = Config()
        config.frontmatter.include_metadata = True
        report = convert_notes([make_note("Gone", trashed=True)], "/o", config)
        assert "deleted: true\n" in report.converted[0].markdown

    def test_large_batch(self) -> None:
        notes = [make_note(f"Note {i}") for i in range(597)]
        notes += [make_note(f"Trashed {i}", trashed=True) for i in range(17)]
        report = convert_notes(notes, "/o")
        assert report.total == 614
        assert report.succeeded == 614

    def test_failures_logged(self) -> None:
        logger = MagicMock()
        convert_notes([make_note("")], "/o", logger=logger)
        logger.debug.assert_called_once()


class TestWriteConverted:
    """Test writing converted notes to disk."""

    def test_writes_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            note = make_note("# A title\nbody")
            report = convert_notes([note, make_note("")], dest)

            outcome = write_converted(report)

            assert outcome.written == [dest / "A title.md"]
            assert (dest / "A title.md").read_text(encoding="utf-8") == (
                render_markdown(note)
            )
            assert len(list(dest.iterdir())) == 1

    def test_existing_file_not_overwritten(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            (dest / "A title.md").write_text("keep me", encoding="utf-8")
            report = convert_notes([make_note("A title")], dest)

            outcome = write_converted(report)

            assert outcome.written == [dest / "A title (1).md"]
            assert (dest / "A title.md").read_text(encoding="utf-8") == "keep me"

    def test_overwrite(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            (dest / "A title.md").write_text("old", encoding="utf-8")
            report = convert_notes([make_note("A title")], dest)

            write_converted(report, overwrite=True)

            assert (dest / "A title.md").read_text(encoding="utf-8") != "old"

    def test_dry_run_writes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            report = convert_notes([make_note("A title")], dest)
            logger = MagicMock()

            outcome = write_converted(report, dry_run=True, logger=logger)

            assert outcome.written == [dest / "A title.md"]
            assert list(dest.iterdir()) == []
            logger.info.assert_called_once_with("[DRY RUN] Would write A title.md")

    def test_custom_extension(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            report = convert_notes([make_note("v1.2 release")], dest)
            outcome = write_converted(report, extension=".markdown")
            assert outcome.written == [dest / "v1.2 release.markdown"]

    def test_write_error_does_not_stop_batch(self) -> None:
        """A note that cannot be written is recorded and later notes are still written."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            notes = [make_note("First"), make_note("Second"), make_note("Third")]
            report = convert_notes(notes, dest)
            real_write_text = Path.write_text

            def failing_write_text(path: Path, *args: Any, **kwargs: Any) -> int:
                if path.name == "Second.md":
                    raise OSError("disk full")
                return real_write_text(path, *args, **kwargs)

            with patch.object(Path, "write_text", failing_write_text):
                outcome = write_converted(report)

            assert outcome.written == [dest / "First.md", dest / "Third.md"]
            assert len(outcome.failed) == 1
            assert outcome.failed[0].note == notes[1]
            assert outcome.failed[0].reason == "disk full"
            assert outcome.failed[0].markdown == render_markdown(notes[1])
            assert (dest / "Third.md").exists()
            assert not (dest / "Second.md").exists()

    def test_long_multibyte_title_is_written(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            notes = [make_note("First"), make_note("日本語" * 40), make_note("Third")]
            report = convert_notes(notes, dest)

            outcome = write_converted(report)

            assert outcome.failed == []
            assert len(outcome.written) == 3
            assert all(path.exists() for path in outcome.written)
            assert len(outcome.written[1].name.encode("utf-8")) <= 255


class TestIncrementPathIfExists:
    """Test numbering of existing files."""

    def test_free_path_kept(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            assert increment_path_if_exists(dest, "single", ".md") == dest / "single.md"

    def test_increments_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            (dest / "single-exists.md").touch()
            assert (
                increment_path_if_exists(dest, "single-exists", ".md")
                == dest / "single-exists (1).md"
            )

    def test_increments_past_existing_numbers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            dest = Path(tmp_dir)
            for name in ["sample-exists.md", "sample-exists (1).md", "sample-exists (2).md"]:
                (dest / name).touch()
            assert (
                increment_path_if_exists(dest, "sample-exists", ".md")
                == dest / "sample-exists (3).md"
            )
