from __future__ import annotations

import time
from pathlib import Path

from rich.console import Console

from gedcomx_converter.config import get_config
from gedcomx_converter.conversion import convert_tree
from gedcomx_converter.core.context import ConversionContext
from gedcomx_converter.loader import load_tree
from gedcomx_converter.logging import get_logger, set_debug
from gedcomx_converter.mapping.result import ConversionResult

console = Console()
log = get_logger("cli")


def load_and_convert(path: Path, *, verbose: bool = False) -> ConversionResult:
    """
    Load a GEDCOM file and convert it with the project configuration.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    if verbose:
        set_debug(True)

    t0 = time.perf_counter()

    tree = load_tree(path)
    result = convert_tree(tree, get_config(), ConversionContext(logger=log))

    elapsed = time.perf_counter() - t0
    if verbose:
        console.log(f"Converted {len(result.persons)} persons in {elapsed:.2f}s")

    return result


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write to a file, or to stdout when no file is given.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
