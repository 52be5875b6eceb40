# src/gedcomx_converter/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union


@dataclass(frozen=True)
class GedcomLine:
    """
    One physical GEDCOM line: ``<level> [<@xref@>] <TAG> [<value>]``.

    ``value`` is kept verbatim (leading spaces included) because CONC
    continuation depends on them.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line does not follow the basic line grammar."""


def tokenize_line(line: str, lineno: int = 0) -> GedcomLine:
    """
    Parse a single GEDCOM line.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME 伝右エ門 //"
        "2 ROMN /Yoshimura/ Takichi"
    """
    raw = line.rstrip("\r\n")
    if lineno == 1:
        raw = raw.lstrip("\ufeff")

    if not raw.strip():
        raise GedcomSyntaxError(f"Line {lineno}: empty line")

    level_str, _, rest = raw.lstrip(" ").partition(" ")
    if not level_str.isdigit():
        raise GedcomSyntaxError(f"Line {lineno}: level is not numeric -> {raw!r}")

    rest = rest.lstrip(" ")
    if not rest:
        raise GedcomSyntaxError(f"Line {lineno}: missing tag -> {raw!r}")

    pointer: Optional[str] = None
    if rest.startswith("@"):
        pointer, _, rest = rest.partition(" ")
        rest = rest.lstrip(" ")
        if not rest:
            raise GedcomSyntaxError(f"Line {lineno}: pointer without tag -> {raw!r}")

    tag, _, value = rest.partition(" ")

    return GedcomLine(
        lineno=lineno,
        level=int(level_str),
        pointer=pointer,
        tag=tag.upper(),
        value=value,
    )


def read_lines(path: Union[str, Path]) -> Iterator[GedcomLine]:
    """
    Yield a GedcomLine for every non-blank line of the file.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8-sig", errors="replace") as f:
        for lineno, raw_line in enumerate(f, start=1):
            if not raw_line.strip():
                continue
            yield tokenize_line(raw_line, lineno=lineno)
