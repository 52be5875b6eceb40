from __future__ import annotations

import re
from typing import List, Optional

from gedcomx_converter.model.conclusion import NamePart, NamePartType
from gedcomx_converter.names.slashes import extract_surname
from gedcomx_converter.records.raw import RawName

_PIECE_SPLIT_RE = re.compile(r",\s*")


def build_parts(value: Optional[str], part_type: NamePartType) -> List[NamePart]:
    """
    Split a comma separated NAME sub-tag value into parts of one type.

        build_parts("Mary, Ann", NamePartType.GIVEN)
        -> [Given "Mary", Given "Ann"]
    """
    if value is None:
        return []

    parts: List[NamePart] = []
    for piece in _PIECE_SPLIT_RE.split(value):
        piece = piece.strip()
        if piece:
            parts.append(NamePart(type=part_type, value=piece))
    return parts


def name_parts_for(raw: RawName) -> Optional[List[NamePart]]:
    """
    Prefix, given, surname and suffix parts of the primary form, in that order.

    Returns None (not an empty list) when nothing was found so the form can
    leave its parts out entirely.
    """
    parts: List[NamePart] = []
    parts.extend(build_parts(raw.prefix, NamePartType.PREFIX))
    parts.extend(build_parts(raw.given, NamePartType.GIVEN))
    parts.extend(build_parts(extract_surname(raw), NamePartType.SURNAME))
    parts.extend(build_parts(raw.suffix, NamePartType.SUFFIX))
    return parts or None


def has_suffix(parts: Optional[List[NamePart]], token: str) -> bool:
    return any(p.type is NamePartType.SUFFIX and p.value == token for p in parts or [])
