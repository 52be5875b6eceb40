"""
Turn GedcomNode records into the immutable raw records the mappers consume.

Readers never warn and never drop information silently: anything without a
modeled field lands in ``extensions`` so the mappers can report it.
"""

from __future__ import annotations

from typing import List, Optional

from gedcomx_converter.loader.tree import GedcomNode
from gedcomx_converter.records.raw import (
    ExtensionTag,
    RawCitation,
    RawFact,
    RawName,
    RawOrdinance,
    RawPerson,
    RawSource,
    RawSubmitter,
)
from gedcomx_converter.records.tags import (
    AKA_TAGS,
    EMAIL_TAGS,
    NAME_TAGS,
    NAME_TYPE_TAGS,
    PERSON_TAGS,
    SUBMITTER_TAGS,
    UID_TAGS,
    WWW_TAGS,
    is_fact_tag,
    is_ordinance_tag,
)


def _opt(value: Optional[str]) -> Optional[str]:
    """Blank GEDCOM values count as absent."""
    if value is None or not value.strip():
        return None
    return value


def _looks_like_pointer(value: Optional[str]) -> bool:
    if not value:
        return False
    v = value.strip()
    return len(v) >= 3 and v.startswith("@") and v.endswith("@")


def record_id(node: GedcomNode) -> str:
    """``@I12@`` -> ``I12``."""
    return (node.pointer or "").strip().strip("@")


def _count(node: GedcomNode, tag: str) -> int:
    return len(node.find_children(tag))


def _extensions(node: GedcomNode, known: set) -> List[ExtensionTag]:
    return [
        ExtensionTag(tag=c.tag, value=_opt(c.value))
        for c in node.children
        if c.tag not in known
    ]


# -----------------------------
# Substructures
# -----------------------------

def read_citation(node: GedcomNode) -> RawCitation:
    target = node.pointer or (node.value or "").strip()
    page = _opt(node.first_value("PAGE"))
    if _looks_like_pointer(target):
        return RawCitation(pointer=target, page=page)
    return RawCitation(text=_opt(node.value), page=page)


def read_citations(node: GedcomNode) -> tuple:
    return tuple(read_citation(c) for c in node.find_children("SOUR"))


def read_name(node: GedcomNode) -> RawName:
    type_tag = next((c.tag for c in node.children if c.tag in NAME_TYPE_TAGS), None)
    return RawName(
        value=node.value,
        prefix=_opt(node.first_value("NPFX")),
        given=_opt(node.first_value("GIVN")),
        surname=_opt(node.first_value("SURN")),
        suffix=_opt(node.first_value("NSFX")),
        fone=_opt(node.first_value("FONE")),
        romn=_opt(node.first_value("ROMN")),
        nickname=_opt(node.first_value("NICK")),
        married_name=_opt(node.first_value("_MARNM")),
        aka=_opt(node.first_value(*AKA_TAGS)),
        type=node.first_value(*NAME_TYPE_TAGS),
        type_tag=type_tag,
        citations=read_citations(node),
        note_count=_count(node, "NOTE"),
        media_count=_count(node, "OBJE"),
        extensions=tuple(_extensions(node, NAME_TAGS)),
    )


def read_fact(node: GedcomNode) -> RawFact:
    return RawFact(
        tag=node.tag,
        value=_opt(node.value),
        type=_opt(node.first_value("TYPE")),
        date=_opt(node.first_value("DATE")),
        place=_opt(node.first_value("PLAC")),
        citations=read_citations(node),
    )


def read_ordinance(node: GedcomNode) -> RawOrdinance:
    return RawOrdinance(
        tag=node.tag,
        date=_opt(node.first_value("DATE")),
        temple=_opt(node.first_value("TEMP")),
        status=_opt(node.first_value("STAT")),
        place=_opt(node.first_value("PLAC")),
    )


# -----------------------------
# Records
# -----------------------------

def read_person(node: GedcomNode) -> RawPerson:
    if node.tag != "INDI":
        raise ValueError(f"Expected INDI node, got {node.tag}")

    uid_node = next((c for c in node.children if c.tag in UID_TAGS), None)
    chan = node.find_first("CHAN")

    person = RawPerson(
        id=record_id(node),
        reference_numbers=[c.value.strip() for c in node.find_children("REFN") if _opt(c.value)],
        associations=[(c.pointer or c.value or "").strip() for c in node.find_children("ASSO")],
        record_file_number=_opt(node.first_value("RFN")),
        ancestor_interest=_opt(node.first_value("ANCI")),
        descendant_interest=_opt(node.first_value("DESI")),
        address=_opt(node.first_value("ADDR")),
        email=_opt(node.first_value(*EMAIL_TAGS)),
        fax=_opt(node.first_value("FAX")),
        phone=_opt(node.first_value("PHON")),
        www=_opt(node.first_value(*WWW_TAGS)),
        uid=_opt(uid_node.value) if uid_node else None,
        uid_tag=uid_node.tag if uid_node else None,
        rin=_opt(node.first_value("RIN")),
        change_date=_opt(chan.first_value("DATE")) if chan else None,
        note_count=_count(node, "NOTE"),
        media_count=_count(node, "OBJE"),
        extensions=_extensions(node, PERSON_TAGS),
    )

    for child in node.children:
        if child.tag == "NAME":
            person.names.append(read_name(child))
        elif child.tag == "SOUR":
            person.citations.append(read_citation(child))
        elif is_ordinance_tag(child.tag):
            person.ordinances.append(read_ordinance(child))
        elif is_fact_tag(child.tag):
            person.facts.append(read_fact(child))

    return person


def read_submitter(node: GedcomNode) -> RawSubmitter:
    if node.tag != "SUBM":
        raise ValueError(f"Expected SUBM node, got {node.tag}")

    chan = node.find_first("CHAN")
    return RawSubmitter(
        id=record_id(node),
        name=_opt(node.first_value("NAME")),
        address=_opt(node.first_value("ADDR")),
        phone=_opt(node.first_value("PHON")),
        fax=_opt(node.first_value("FAX")),
        email=_opt(node.first_value(*EMAIL_TAGS)),
        www=_opt(node.first_value(*WWW_TAGS)),
        language=_opt(node.first_value("LANG")),
        rin=_opt(node.first_value("RIN")),
        change_date=_opt(chan.first_value("DATE")) if chan else None,
        extensions=_extensions(node, SUBMITTER_TAGS),
    )


def read_source(node: GedcomNode) -> RawSource:
    if node.tag != "SOUR":
        raise ValueError(f"Expected SOUR node, got {node.tag}")

    return RawSource(
        id=record_id(node),
        title=_opt(node.first_value("TITL")),
        author=_opt(node.first_value("AUTH")),
        publication=_opt(node.first_value("PUBL")),
        text=_opt(node.first_value("TEXT")),
    )
