"""
conclusion.py
GEDCOM X style conclusion model produced by the mappers.

Every record exposes ``to_dict()`` returning camelCase JSON-ready data with
absent values omitted, so that the exporter never has to know the shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None and v != []}


# -----------------------------
# Closed vocabularies
# -----------------------------

class NamePartType(str, Enum):
    PREFIX = "http://gedcomx.org/Prefix"
    GIVEN = "http://gedcomx.org/Given"
    SURNAME = "http://gedcomx.org/Surname"
    SUFFIX = "http://gedcomx.org/Suffix"


class NameType(str, Enum):
    NICKNAME = "http://gedcomx.org/Nickname"
    MARRIED_NAME = "http://gedcomx.org/MarriedName"
    ALSO_KNOWN_AS = "http://gedcomx.org/AlsoKnownAs"


class GenderType(str, Enum):
    MALE = "http://gedcomx.org/Male"
    FEMALE = "http://gedcomx.org/Female"
    UNKNOWN = "http://gedcomx.org/Unknown"


class ScriptTag(str, Enum):
    """Which rendering of a name a NameForm holds."""

    PRIMARY = "primary"
    PHONETIC = "phonetic"
    ROMANIZED = "romanized"


# -----------------------------
# Names
# -----------------------------

@dataclass(frozen=True, slots=True)
class NamePart:
    type: NamePartType
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "value": self.value}


@dataclass(slots=True)
class NameForm:
    """
    One script rendering of a name.

    ``parts is None`` means no structured parts are known; it is kept
    distinct from an empty list and omitted on export.
    """
    script: ScriptTag
    lang: Optional[str] = None
    full_text: Optional[str] = None
    parts: Optional[List[NamePart]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = _compact({"lang": self.lang, "fullText": self.full_text})
        if self.parts is not None:
            data["parts"] = [p.to_dict() for p in self.parts]
        return data


@dataclass(slots=True)
class SourceReference:
    description: str
    page: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"description": self.description, "page": self.page})


@dataclass(slots=True)
class Name:
    type: Optional[NameType] = None
    name_forms: List[NameForm] = field(default_factory=list)
    preferred: Optional[bool] = None
    sources: List[SourceReference] = field(default_factory=list)

    def form_for(self, script: ScriptTag) -> Optional[NameForm]:
        for form in self.name_forms:
            if form.script is script:
                return form
        return None

    @property
    def primary_form(self) -> Optional[NameForm]:
        return self.form_for(ScriptTag.PRIMARY)

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.type.value if self.type else None,
            "preferred": self.preferred,
            "nameForms": [f.to_dict() for f in self.name_forms],
            "sources": [s.to_dict() for s in self.sources],
        })


# -----------------------------
# Facts, gender, identifiers
# -----------------------------

@dataclass(frozen=True, slots=True)
class Qualifier:
    name: str
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"name": self.name, "value": self.value})


@dataclass(slots=True)
class Fact:
    type: str
    date: Optional[str] = None
    place: Optional[str] = None
    value: Optional[str] = None
    qualifiers: Optional[List[Qualifier]] = None
    sources: List[SourceReference] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.type,
            "date": {"original": self.date} if self.date else None,
            "place": {"original": self.place} if self.place else None,
            "value": self.value,
            "qualifiers": [q.to_dict() for q in self.qualifiers] if self.qualifiers else None,
            "sources": [s.to_dict() for s in self.sources],
        })


@dataclass(frozen=True, slots=True)
class Gender:
    type: GenderType

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


@dataclass(frozen=True, slots=True)
class Identifier:
    value: str
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "type": self.type}


@dataclass(slots=True)
class OrdinanceRecord:
    """Person extension element carrying one LDS ordinance."""
    type: str
    complete_date: Optional[str] = None
    status: Optional[str] = None
    temple_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.type,
            "completeDate": {"original": self.complete_date} if self.complete_date else None,
            "status": self.status,
            "templeCode": self.temple_code,
        })


# -----------------------------
# Top-level records
# -----------------------------

@dataclass(slots=True)
class Person:
    id: str
    names: List[Name] = field(default_factory=list)
    facts: List[Fact] = field(default_factory=list)
    gender: Optional[Gender] = None
    sources: List[SourceReference] = field(default_factory=list)
    identifiers: List[Identifier] = field(default_factory=list)
    extensions: List[OrdinanceRecord] = field(default_factory=list)

    @property
    def preferred_name(self) -> Optional[Name]:
        for name in self.names:
            if name.preferred:
                return name
        return None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "id": self.id,
            "gender": self.gender.to_dict() if self.gender else None,
            "names": [n.to_dict() for n in self.names],
            "facts": [f.to_dict() for f in self.facts],
            "sources": [s.to_dict() for s in self.sources],
            "identifiers": [i.to_dict() for i in self.identifiers],
            "ordinances": [o.to_dict() for o in self.extensions],
        })


@dataclass(slots=True)
class SourceDescription:
    id: str
    citation: str
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "id": self.id,
            "citations": [{"value": self.citation}],
            "titles": [{"value": self.title}] if self.title else None,
        })


@dataclass(slots=True)
class Agent:
    """Dataset contributor built from a SUBM record."""
    id: str
    name: Optional[str] = None
    address: Optional[str] = None
    phones: List[str] = field(default_factory=list)
    faxes: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    homepage: Optional[str] = None
    language: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "id": self.id,
            "names": [{"value": self.name}] if self.name else None,
            "addresses": [{"value": self.address}] if self.address else None,
            "phones": [f"tel:{p}" for p in self.phones],
            "faxes": [f"fax:{f}" for f in self.faxes],
            "emails": [f"mailto:{e}" for e in self.emails],
            "homepage": self.homepage,
            "language": self.language,
        })
