from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


# -----------------------------
# Small atoms
# -----------------------------

@dataclass(frozen=True, slots=True)
class RawCitation:
    """
    A SOUR substructure: either a pointer (``@S1@``) with an optional PAGE,
    or inline citation text.
    """
    pointer: Optional[str] = None
    page: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ExtensionTag:
    """An unrecognized (usually underscore) tag kept for reporting."""
    tag: str
    value: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.tag} {self.value}" if self.value else self.tag


# -----------------------------
# NAME
# -----------------------------

@dataclass(frozen=True, slots=True)
class RawName:
    """
    One GEDCOM NAME structure prior to decomposition.

    Tests/mappers expect:
      - RawName(value="John /Doe/")
      - optional sub-tag values (given/surname/prefix/suffix/fone/romn/...)
    """
    value: Optional[str] = None
    prefix: Optional[str] = None          # NPFX
    given: Optional[str] = None           # GIVN
    surname: Optional[str] = None         # SURN
    suffix: Optional[str] = None          # NSFX
    fone: Optional[str] = None            # FONE
    romn: Optional[str] = None            # ROMN
    nickname: Optional[str] = None        # NICK
    married_name: Optional[str] = None    # _MARNM
    aka: Optional[str] = None             # _AKA / _AKAN / ALIA
    type: Optional[str] = None            # TYPE / _TYPE
    type_tag: Optional[str] = None
    citations: Tuple[RawCitation, ...] = ()
    note_count: int = 0
    media_count: int = 0
    extensions: Tuple[ExtensionTag, ...] = ()


# -----------------------------
# Facts and ordinances
# -----------------------------

@dataclass(frozen=True, slots=True)
class RawFact:
    tag: str
    value: Optional[str] = None
    type: Optional[str] = None
    date: Optional[str] = None
    place: Optional[str] = None
    citations: Tuple[RawCitation, ...] = ()


@dataclass(frozen=True, slots=True)
class RawOrdinance:
    tag: str
    date: Optional[str] = None
    temple: Optional[str] = None
    status: Optional[str] = None
    place: Optional[str] = None


# -----------------------------
# Records
# -----------------------------

@dataclass(slots=True)
class RawPerson:
    """
    INDI record split into what the person mapper consumes and what it only
    reports as ignored.
    """
    id: str
    names: List[RawName] = field(default_factory=list)
    facts: List[RawFact] = field(default_factory=list)
    ordinances: List[RawOrdinance] = field(default_factory=list)
    citations: List[RawCitation] = field(default_factory=list)

    reference_numbers: List[str] = field(default_factory=list)   # REFN
    associations: List[str] = field(default_factory=list)        # ASSO
    record_file_number: Optional[str] = None                     # RFN
    ancestor_interest: Optional[str] = None                      # ANCI
    descendant_interest: Optional[str] = None                    # DESI
    address: Optional[str] = None                                # ADDR
    email: Optional[str] = None
    fax: Optional[str] = None
    phone: Optional[str] = None
    www: Optional[str] = None
    uid: Optional[str] = None
    uid_tag: Optional[str] = None
    rin: Optional[str] = None
    change_date: Optional[str] = None                            # CHAN.DATE
    note_count: int = 0
    media_count: int = 0
    extensions: List[ExtensionTag] = field(default_factory=list)


@dataclass(slots=True)
class RawSubmitter:
    id: str
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    www: Optional[str] = None
    language: Optional[str] = None
    rin: Optional[str] = None
    change_date: Optional[str] = None
    extensions: List[ExtensionTag] = field(default_factory=list)


@dataclass(slots=True)
class RawSource:
    id: str
    title: Optional[str] = None
    author: Optional[str] = None
    publication: Optional[str] = None
    text: Optional[str] = None
