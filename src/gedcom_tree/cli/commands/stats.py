from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_tree.cli.utils import abort_on_error, console, load_gedcom


def stats_command(
    gedcom: Path = typer.Argument(..., dir_okay=False, help="GEDCOM file to parse"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    with abort_on_error():
        _, stats = load_gedcom(gedcom, verbose=verbose)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Records", str(stats["records"]))
    table.add_row("Individuals", str(stats["individuals"]))
    table.add_row("Families", str(stats["families"]))
    table.add_row("Parent edges", str(stats["parent_edges"]))
    table.add_row("Child edges", str(stats["child_edges"]))
    table.add_row("Spouse edges", str(stats["spouse_edges"]))
    table.add_row("Skipped references", str(stats["skipped_references"]))
    table.add_row("Duplicate references", str(stats["duplicate_references"]))

    console.print(table)
