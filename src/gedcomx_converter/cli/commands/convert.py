from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcomx_converter.cli.utils import load_and_convert, write_text
from gedcomx_converter.exporter import serialize_result

console = Console(stderr=True)


def convert_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
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
    diagnostics: bool = typer.Option(
        False,
        "--diagnostics",
        help="Include conversion warnings in the JSON document",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Convert a GEDCOM file to GEDCOM X JSON (stdout by default).
    """
    result = load_and_convert(gedcom, verbose=verbose)

    payload = serialize_result(
        result,
        indent=2 if pretty else None,
        include_diagnostics=diagnostics,
    )
    write_text(payload, out=out)

    if verbose:
        console.log(f"Export complete ({len(result.diagnostics)} warnings)")
