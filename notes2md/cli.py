"""Command line interface for notes2md."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
from loguru import logger

from . import __version__
from .config import Config, default_config_path, load_config, save_config
from .conversion import convert_notes, write_converted
from .decoders import decoder_for_source
from .exceptions import DecodeError
from .utils import report_failed_note, report_summary


class DefaultCommandGroup(click.Group):
    """Group that falls back to a default command when none is provided."""

    def __init__(
        self,
        *args: Any,
        default_command: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if args:
            cmd = self.get_command(ctx, args[0])
            if cmd is not None:
                return args[0], cmd, args[1:]

        if self.default_command:
            cmd = self.get_command(ctx, self.default_command)
            if cmd is None:
                raise click.UsageError(
                    f"Default command '{self.default_command}' not found."
                )
            return self.default_command, cmd, args

        result: tuple[str | None, Any, list[str]] = super().resolve_command(ctx, args)
        return result


def setup_logger(verbose: bool = False) -> Any:
    """Set up logger with appropriate level."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{level}: {message}",
        level="DEBUG" if verbose else "INFO",
    )

    return logger


def get_config_or_default(
    dest_dir: Path, config_path: Path | None = None, **kwargs: Any
) -> Config:
    """Load config and apply command line overrides.

    Flags only override config values when they are set.

    Args:
        dest_dir: Destination directory of the conversion.
        config_path: Optional explicit config file.
        **kwargs: Command line flag values.

    Returns:
        Effective config object.
    """
    config = load_config(dest_dir, config_path) or Config()

    if kwargs.get("skip_trashed"):
        config.conversion.include_trashed = False
    if kwargs.get("include_metadata"):
        config.frontmatter.include_metadata = True

    return config


@click.group(
    cls=DefaultCommandGroup,
    default_command="convert",
    context_settings={"ignore_unknown_options": True},
)
@click.version_option(version=__version__, prog_name="notes2md")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Convert Simplenote or Apple Notes exports to markdown files.

    The markdown files can be used with Notable, Obsidian or other editors.
    """


@cli.command()
@click.option(
    "--source-path",
    "-s",
    required=True,
    type=click.Path(exists=True, readable=True, path_type=Path),
    help="A JSON file is parsed as Simplenote data; a directory is parsed as Apple Notes data",
)
@click.option(
    "--dest-dir",
    "-d",
    required=True,
    type=click.Path(
        exists=True, file_okay=False, dir_okay=True, writable=True, path_type=Path
    ),
    help="Writable directory where converted note files are written",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Config file to use instead of DEST_DIR/.notes2md/config.yaml",
)
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Show what would be done without writing files",
)
@click.option(
    "--skip-trashed",
    is_flag=True,
    help="Do not convert notes from the export's trash",
)
@click.option(
    "--metadata",
    "include_metadata",
    is_flag=True,
    help="Add deleted, pinned and tags fields to the front matter",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def convert(
    source_path: Path,
    dest_dir: Path,
    config_path: Path | None,
    dry_run: bool,
    skip_trashed: bool,
    include_metadata: bool,
    verbose: bool,
) -> None:
    """Convert a note export into markdown files with front matter.

    This tool will:
    - Read a Simplenote notes.json export (file) or an Apple Notes export (directory)
    - Use the first line of each note as its title and filename
    - Write one markdown file per note with title, created and modified front matter
    - Report notes whose title cannot be used as a filename
    """
    logger = setup_logger(verbose)

    if dry_run:
        logger.info(f"DRY RUN: Converting {source_path} into {dest_dir}")
    else:
        logger.info(f"Converting {source_path} into {dest_dir}")

    config = get_config_or_default(
        dest_dir,
        config_path,
        skip_trashed=skip_trashed,
        include_metadata=include_metadata,
    )

    try:
        decoder = decoder_for_source(source_path)
        export = decoder.decode()
    except DecodeError as e:
        logger.error(f"Error decoding export: {e}")
        raise click.ClickException(str(e)) from e
    except NotImplementedError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    logger.info(
        f"{decoder.name} export - active: {export.active_count}, "
        f"trashed: {export.trashed_count}"
    )

    report = convert_notes(export.notes, dest_dir, config=config, logger=logger)
    for failed in report.failed:
        report_failed_note(failed)

    outcome = write_converted(
        report,
        extension=config.output.extension,
        dry_run=dry_run,
        overwrite=config.output.on_collision == "overwrite",
        logger=logger,
    )
    for failed in outcome.failed:
        report_failed_note(failed)

    report_summary(report, outcome, dry_run)
    logger.info("Conversion complete!")


@cli.command(name="init-config")
@click.option(
    "--dest-dir",
    "-d",
    required=True,
    type=click.Path(
        exists=True, file_okay=False, dir_okay=True, writable=True, path_type=Path
    ),
    help="Destination directory that will hold .notes2md/config.yaml",
)
@click.option(
    "--overwrite",
    is_flag=True,
    help="Overwrite an existing config.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def init_config(dest_dir: Path, overwrite: bool, verbose: bool) -> None:
    """Write a default config file into the destination directory."""
    logger = setup_logger(verbose)

    config_path = default_config_path(dest_dir)
    if config_path.exists() and not overwrite:
        raise click.ClickException(
            f"config.yaml already exists at {config_path}. Use --overwrite to overwrite."
        )

    try:
        path = save_config(Config(), dest_dir)
    except OSError as e:
        logger.error(f"Error writing config: {e}")
        raise click.ClickException(str(e)) from e

    logger.info(f"Wrote default config to {path}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
