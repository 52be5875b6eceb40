from __future__ import annotations

import typer
from rich.console import Console

from gedcomx_converter.cli.commands.convert import convert_command
from gedcomx_converter.cli.commands.names import names_command
from gedcomx_converter.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcomx",
    help="Convert GEDCOM person records to the GEDCOM X conclusion model",
    add_completion=False,
)

console = Console()

app.command("convert")(convert_command)
app.command("names")(names_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
