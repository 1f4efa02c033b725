from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_tree.cli.utils import abort_on_error, err_console, load_gedcom, write_output
from gedcom_tree.exporter import dumps_tree, write_gedcom


def export_command(
    gedcom: Path = typer.Argument(..., dir_okay=False, help="GEDCOM file to parse"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Export individuals, families and skipped references as JSON.
    """
    with abort_on_error():
        tree, _ = load_gedcom(gedcom, verbose=verbose)

    if verbose:
        err_console.log("Exporting JSON")

    write_output(dumps_tree(tree, indent=2 if pretty else None), out=out)


def print_command(
    gedcom: Path = typer.Argument(..., dir_okay=False, help="GEDCOM file to parse"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
):
    """
    Reprint a GEDCOM file from its parsed tree.
    """
    with abort_on_error():
        tree, _ = load_gedcom(gedcom)

    write_output(write_gedcom(tree.root), out=out)
