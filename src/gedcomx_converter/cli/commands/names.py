from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcomx_converter.cli.utils import load_and_convert

console = Console()


def _format_parts(form) -> str:
    if form.parts is None:
        return "-"
    return ", ".join(f"{p.type.name.title()}={p.value}" for p in form.parts)


def names_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    person: Optional[str] = typer.Option(
        None,
        "--person",
        "-p",
        help="Only show the person with this id",
    ),
):
    """
    Show every converted name form with its parts.
    """
    result = load_and_convert(gedcom)

    table = Table(title="Name forms")
    table.add_column("Person", style="bold")
    table.add_column("Type")
    table.add_column("Pref", justify="center")
    table.add_column("Lang")
    table.add_column("Full text")
    table.add_column("Parts")

    for p in result.persons:
        if person and p.id != person:
            continue
        for name in p.names:
            label = name.type.name.replace("_", " ").title() if name.type else "Primary"
            for form in name.name_forms:
                table.add_row(
                    p.id,
                    label,
                    "*" if name.preferred else "",
                    form.lang or "",
                    form.full_text or "",
                    _format_parts(form),
                )

    console.print(table)
