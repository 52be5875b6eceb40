"""
GEDCOM surname slashes in NAME values.

    "John /Smith/"   -> "John Smith"     (slashes next to spaces are dropped)
    "John/Smith"     -> "John Smith"     (a slash between letters becomes a space)
    "伝右エ門 //"     -> "伝右エ門 //"     (given-name-only marker kept as-is)
"""

from __future__ import annotations

import re
from typing import Optional

from gedcomx_converter.records.raw import RawName

GIVEN_ONLY_MARKER = "//"

# Japanese given-name-only entries ("XXXX //") keep their marker.
_NO_LATIN_LETTERS_RE = re.compile(r"[^a-zA-Z]+")


def is_given_only(value: str) -> bool:
    return GIVEN_ONLY_MARKER in value and _NO_LATIN_LETTERS_RE.fullmatch(value) is not None


def _slash_becomes_space(value: str, index: int) -> bool:
    if index <= 0 or index >= len(value) - 1:
        return False
    return value[index - 1] != " " and value[index + 1] != " "


def normalize_name_value(value: Optional[str]) -> Optional[str]:
    """Remove surname slashes from a NAME value, leftmost first, then trim."""
    if value is None:
        return None

    if is_given_only(value):
        return value.strip()

    index = value.find("/")
    while index >= 0:
        replacement = " " if _slash_becomes_space(value, index) else ""
        value = value[:index] + replacement + value[index + 1:]
        index = value.find("/")

    return value.strip()


def extract_surname(raw: RawName) -> Optional[str]:
    """
    SURN when present, otherwise the text between the first pair of slashes
    (or after a lone slash) in the NAME value.
    """
    if raw.surname is not None:
        return raw.surname
    if raw.value is None:
        return None

    start = raw.value.find("/")
    if start < 0:
        return None

    surname = raw.value[start + 1:]
    end = surname.find("/")
    if end >= 0:
        surname = surname[:end]

    return surname.strip() or None
