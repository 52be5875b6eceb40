# src/gedcomx_converter/mapping/facts.py

from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence
from urllib.parse import quote

from gedcomx_converter.model.conclusion import Fact, Qualifier, SourceReference
from gedcomx_converter.records.raw import RawCitation, RawFact, RawOrdinance
from gedcomx_converter.records.tags import FACT_TYPE_MAP, GENERIC_FACT_TAGS, ORDINANCE_TYPE_MAP

TEMPLE_CODE_QUALIFIER = "TempleCode"


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------

def _trim(s: Optional[str]) -> Optional[str]:
    if s is None:
        return None
    s = s.strip()
    return s or None


def normalize_place(place: Optional[str]) -> Optional[str]:
    """
    Collapse internal whitespace and normalize spaces around commas.
    """
    s = _trim(place)
    if s is None:
        return None
    s = re.sub(r"\s+", " ", s)
    s = re.sub(r"\s*,\s*", ", ", s)
    return s


def custom_fact_type(label: str) -> str:
    return "data:," + quote(label.strip())


def fact_type_for(raw_fact: RawFact) -> Optional[str]:
    tag = (raw_fact.tag or "").upper()
    if tag in FACT_TYPE_MAP:
        return FACT_TYPE_MAP[tag]
    if tag in GENERIC_FACT_TAGS and raw_fact.type:
        return custom_fact_type(raw_fact.type)
    return None


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------

def fact_from(
    raw_fact: RawFact,
    resolve_sources: Optional[Callable[[Sequence[RawCitation]], List[SourceReference]]] = None,
) -> Optional[Fact]:
    """
    Convert an event/attribute structure into a Fact.

    Returns None for anything that is not a convertible fact (SEX, EVEN
    without TYPE, unknown tags); the caller decides what to do with those.
    """
    fact_type = fact_type_for(raw_fact)
    if fact_type is None:
        return None

    value = _trim(raw_fact.value)
    if value is not None and value.upper() == "Y":
        # "1 DEAT Y" asserts the event happened without further detail
        value = None

    fact = Fact(
        type=fact_type,
        date=_trim(raw_fact.date),
        place=normalize_place(raw_fact.place),
        value=value,
    )
    if raw_fact.citations and resolve_sources is not None:
        fact.sources = resolve_sources(raw_fact.citations)
    return fact


def ordinance_from(raw_ordinance: RawOrdinance) -> Fact:
    """
    Convert an LDS ordinance structure into a Fact.

    Qualifiers are ordered temple first, status second:
      - TEMP -> Qualifier("TempleCode", <code>)
      - STAT -> Qualifier(<status>)
    """
    tag = (raw_ordinance.tag or "").upper()
    fact_type = ORDINANCE_TYPE_MAP.get(tag) or custom_fact_type(tag or "Ordinance")

    qualifiers: List[Qualifier] = []
    if raw_ordinance.temple:
        qualifiers.append(Qualifier(name=TEMPLE_CODE_QUALIFIER, value=raw_ordinance.temple.strip()))
    if raw_ordinance.status:
        qualifiers.append(Qualifier(name=raw_ordinance.status.strip()))

    return Fact(
        type=fact_type,
        date=_trim(raw_ordinance.date),
        place=normalize_place(raw_ordinance.place),
        qualifiers=qualifiers or None,
    )
