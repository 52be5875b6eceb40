from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcomx_converter.cli.utils import load_and_convert

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    warnings: bool = typer.Option(
        False,
        "--warnings",
        "-w",
        help="List every conversion warning",
    ),
):
    """
    Show summary statistics for a conversion run.
    """
    result = load_and_convert(gedcom)

    table = Table(title="GEDCOM X Conversion")
    table.add_column("Item", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Persons", str(len(result.persons)))
    table.add_row("Names", str(sum(len(p.names) for p in result.persons)))
    table.add_row("Facts", str(sum(len(p.facts) for p in result.persons)))
    table.add_row("Ordinances", str(sum(len(p.extensions) for p in result.persons)))
    table.add_row("Source descriptions", str(len(result.source_descriptions)))
    table.add_row("Warnings", str(len(result.diagnostics)))

    console.print(table)

    if warnings:
        for diag in result.diagnostics:
            console.print(f"[yellow]{diag.context}[/yellow] {diag.message}")
