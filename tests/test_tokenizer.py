# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcomx_converter.loader import GedcomSyntaxError, read_lines, tokenize_line


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_keeps_slashes_in_value() -> None:
    token = tokenize_line("2 ROMN /Yoshimura/ Takichi\n", lineno=10)
    assert token.level == 2
    assert token.tag == "ROMN"
    assert token.value == "/Yoshimura/ Takichi"


def test_tokenize_line_uppercases_tag() -> None:
    assert tokenize_line("1 name Jane /Doe/").tag == "NAME"


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_line_pointer_without_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 @I1@", lineno=1)


def test_read_lines_skips_blank_lines(tmp_path) -> None:
    path = tmp_path / "small.ged"
    path.write_text("0 HEAD\n\n0 @I1@ INDI\n1 NAME 伝右エ門 //\n0 TRLR\n", encoding="utf-8")

    lines = list(read_lines(path))
    assert [line.tag for line in lines] == ["HEAD", "INDI", "NAME", "TRLR"]
    assert lines[2].value == "伝右エ門 //"
    assert lines[3].lineno == 5


def test_read_lines_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(read_lines(tmp_path / "missing.ged"))
