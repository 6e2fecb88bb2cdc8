"""Console reporting helpers for notes2md."""

from __future__ import annotations

from rich.console import Console

from .conversion import ConversionReport, FailedNote, WriteOutcome

console = Console()


def report_failed_note(failed: FailedNote) -> None:
    """Print a failed note's rendered document followed by the failure reason."""
    console.print("[bold red]ERROR processing Note:[/]")
    console.print(
        failed.markdown, markup=False, highlight=False, emoji=False, soft_wrap=True
    )
    console.print(
        failed.reason, style="red", markup=False, highlight=False, emoji=False
    )


def report_summary(
    report: ConversionReport, outcome: WriteOutcome, dry_run: bool
) -> None:
    """Print summary statistics for a converted batch."""
    console.print(
        f"[bold green]Conversion Summary[/] {'(dry run)' if dry_run else ''}"
    )
    console.print(f"Total notes: [bold]{report.total}[/]")
    console.print(f"Converted: [bold]{report.succeeded}[/]")
    console.print(f"Failed: [bold]{report.failed_count}[/]")
    if report.skipped:
        console.print(f"Skipped trashed: [bold]{report.skipped}[/]")
    if outcome.failed:
        console.print(f"Write errors: [bold]{len(outcome.failed)}[/]")
    console.print(
        f"Files {'to write' if dry_run else 'written'}: [bold]{len(outcome.written)}[/]"
    )
