from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_tree.cli.utils import abort_on_error, console, load_gedcom


def roots_command(
    gedcom: Path = typer.Argument(..., dir_okay=False, help="GEDCOM file to parse"),
):
    """
    List the surname roots: the earliest ancestor of each surname line.
    """
    with abort_on_error():
        tree, _ = load_gedcom(gedcom)

    table = Table(title="Surname Roots")
    table.add_column("Reference", style="bold")
    table.add_column("Name")
    table.add_column("Surname")
    table.add_column("Location")

    for person in tree.surname_roots():
        table.add_row(
            person.reference or "",
            person.display_name,
            person.surname,
            person.representative_location() or "",
        )

    console.print(table)
