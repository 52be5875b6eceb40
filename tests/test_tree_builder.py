# tests/test_tree_builder.py

from __future__ import annotations

import pytest

from gedcomx_converter.loader import GedcomStructureError, GedcomTree, build_tree, load_tree, tokenize_line


def _lines(*raw: str):
    return [tokenize_line(line, lineno=i) for i, line in enumerate(raw, start=1)]


def test_build_tree_nests_by_level() -> None:
    tree = build_tree(_lines(
        "0 @I1@ INDI",
        "1 NAME /吉村/ 太吉",
        "2 GIVN 太吉",
        "1 SEX M",
        "0 TRLR",
    ))

    assert isinstance(tree, GedcomTree)
    assert len(tree) == 2
    indi = tree.records[0]
    assert [c.tag for c in indi.children] == ["NAME", "SEX"]
    assert indi.find_first("NAME").first_value("GIVN") == "太吉"
    assert [n.tag for n in indi.iter_subtree()] == ["INDI", "NAME", "GIVN", "SEX"]


def test_continuation_lines_fold_into_parent_value() -> None:
    tree = build_tree(_lines(
        "0 @N1@ NOTE First",
        "1 CONC  part",
        "1 CONT Second line",
    ))
    note = tree.records[0]
    assert note.value == "First part\nSecond line"
    assert note.children == []


def test_level_jump_raises() -> None:
    with pytest.raises(GedcomStructureError):
        build_tree(_lines("0 @I1@ INDI", "2 GIVN Jane"))


def test_pointer_lookup_and_records_by_tag(sample_ged) -> None:
    tree = load_tree(sample_ged)

    assert tree.records[0].tag == "HEAD"
    assert [r.pointer for r in tree.records_by_tag("indi")] == ["@I1@", "@I2@"]
    assert tree.find_by_pointer("@S1@").first_value("TITL") == "Koseki register"
    assert tree.find_by_pointer("@X9@") is None


def test_submitter_address_continuation(sample_ged) -> None:
    subm = load_tree(sample_ged).find_by_pointer("@U1@")
    assert subm.first_value("ADDR") == "1-2-3 Chiyoda\nTokyo"
