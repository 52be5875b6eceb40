# tests/test_name_parts.py

from __future__ import annotations

from gedcomx_converter.model.conclusion import NamePart, NamePartType
from gedcomx_converter.names.parts import build_parts, has_suffix, name_parts_for
from gedcomx_converter.records.raw import RawName


def test_build_parts_splits_on_commas() -> None:
    parts = build_parts("Mary, Ann", NamePartType.GIVEN)
    assert parts == [
        NamePart(NamePartType.GIVEN, "Mary"),
        NamePart(NamePartType.GIVEN, "Ann"),
    ]


def test_build_parts_trims_and_drops_empty_pieces() -> None:
    parts = build_parts(" Mary ,,  Ann,  ", NamePartType.GIVEN)
    assert [p.value for p in parts] == ["Mary", "Ann"]


def test_build_parts_absent_and_blank() -> None:
    assert build_parts(None, NamePartType.SURNAME) == []
    assert build_parts("", NamePartType.SURNAME) == []
    assert build_parts(" , ", NamePartType.SURNAME) == []


def test_name_parts_order_is_prefix_given_surname_suffix() -> None:
    raw = RawName(
        value="Dr. John /Smith/ Jr.",
        prefix="Dr.",
        given="John",
        suffix="Jr.",
    )
    parts = name_parts_for(raw)
    assert [(p.type, p.value) for p in parts] == [
        (NamePartType.PREFIX, "Dr."),
        (NamePartType.GIVEN, "John"),
        (NamePartType.SURNAME, "Smith"),
        (NamePartType.SUFFIX, "Jr."),
    ]


def test_name_parts_none_when_nothing_found() -> None:
    assert name_parts_for(RawName(value="John Smith")) is None
    assert name_parts_for(RawName()) is None


def test_has_suffix() -> None:
    parts = [NamePart(NamePartType.GIVEN, "夫人"), NamePart(NamePartType.SUFFIX, "夫人")]
    assert has_suffix(parts, "夫人")
    assert not has_suffix(parts[:1], "夫人")
    assert not has_suffix(None, "夫人")
