from __future__ import annotations

import typer

from gedcom_tree.cli.commands import export_command, print_command, roots_command, stats_command

app = typer.Typer(
    name="gedcom-tree",
    help="GEDCOM tree parser, linker, and exporter",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("export")(export_command)
app.command("print")(print_command)
app.command("roots")(roots_command)


def main():
    app()


if __name__ == "__main__":
    main()
