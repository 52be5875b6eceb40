# tests/test_name_variants.py

from __future__ import annotations

from gedcomx_converter.model.conclusion import NamePartType, ScriptTag
from gedcomx_converter.names.settings import NameSettings
from gedcomx_converter.names.variants import split_segments, synthesize_variant


def _pairs(form):
    return [(p.type, p.value) for p in form.parts or []]


def test_split_segments_drops_trailing_empties() -> None:
    assert split_segments("/Yoshimura/ Takichi") == ["", "Yoshimura", " Takichi"]
    assert split_segments("/Yoshimura/") == ["", "Yoshimura"]
    assert split_segments("Taro/") == ["Taro"]
    assert split_segments("/") == []


def test_given_only_marker() -> None:
    form = synthesize_variant("伝右エ門//", ScriptTag.PHONETIC)
    assert _pairs(form) == [(NamePartType.GIVEN, "伝右エ門")]
    assert form.full_text == "伝右エ門//"
    assert form.lang == "ja-Hrkt"
    assert form.script is ScriptTag.PHONETIC


def test_three_segments_give_surname_then_given() -> None:
    form = synthesize_variant("/Yoshimura/ Takichi", ScriptTag.ROMANIZED)
    assert _pairs(form) == [
        (NamePartType.SURNAME, "Yoshimura"),
        (NamePartType.GIVEN, "Takichi"),
    ]
    assert form.full_text == "Yoshimura Takichi"
    assert form.lang == "ja-Latn"


def test_slashes_are_removed_without_space_substitution() -> None:
    form = synthesize_variant("/Yoshimura/Takichi", ScriptTag.ROMANIZED)
    assert _pairs(form) == [
        (NamePartType.SURNAME, "Yoshimura"),
        (NamePartType.GIVEN, "Takichi"),
    ]
    assert form.full_text == "YoshimuraTakichi"


def test_two_segments_give_only_the_given_name() -> None:
    form = synthesize_variant("ヨシムラ/タキチ", ScriptTag.PHONETIC)
    assert _pairs(form) == [(NamePartType.GIVEN, "タキチ")]
    assert form.full_text == "ヨシムラタキチ"


def test_surname_only_variant_reads_as_two_segments() -> None:
    form = synthesize_variant("/Yoshimura/", ScriptTag.ROMANIZED)
    assert _pairs(form) == [(NamePartType.GIVEN, "Yoshimura")]
    assert form.full_text == "Yoshimura"


def test_no_slash_keeps_full_text_and_omits_parts() -> None:
    form = synthesize_variant("Yoshimura Takichi", ScriptTag.ROMANIZED)
    assert form.parts is None
    assert form.full_text == "Yoshimura Takichi"


def test_unmatched_segment_count_falls_back_to_full_text() -> None:
    form = synthesize_variant("a/b/c/d", ScriptTag.ROMANIZED)
    assert form.parts is None
    assert form.full_text == "a/b/c/d"

    form = synthesize_variant("Taro/", ScriptTag.ROMANIZED)
    assert form.parts is None
    assert form.full_text == "Taro/"


def test_female_suffix_is_seeded_first_per_script() -> None:
    fone = synthesize_variant("/ヨシムラ/ ハナ", ScriptTag.PHONETIC, female_suffix=True)
    romn = synthesize_variant("/Yoshimura/ Hana", ScriptTag.ROMANIZED, female_suffix=True)

    assert _pairs(fone) == [
        (NamePartType.SUFFIX, "フジン"),
        (NamePartType.SURNAME, "ヨシムラ"),
        (NamePartType.GIVEN, "ハナ"),
    ]
    assert _pairs(romn)[0] == (NamePartType.SUFFIX, "Fujin")


def test_female_suffix_alone_when_no_structure() -> None:
    form = synthesize_variant("Yoshimura", ScriptTag.ROMANIZED, female_suffix=True)
    assert _pairs(form) == [(NamePartType.SUFFIX, "Fujin")]
    assert form.full_text == "Yoshimura"


def test_blank_segments_produce_no_parts() -> None:
    form = synthesize_variant("/ / Takichi", ScriptTag.ROMANIZED)
    assert _pairs(form) == [(NamePartType.GIVEN, "Takichi")]


def test_custom_settings_drive_lang_and_honorific() -> None:
    settings = NameSettings(
        langs={ScriptTag.PRIMARY: "zh", ScriptTag.PHONETIC: "zh-Bopo", ScriptTag.ROMANIZED: "zh-Latn"},
        female_honorific="夫人",
        honorific_translations={ScriptTag.ROMANIZED: "Furen"},
    )
    form = synthesize_variant("/Wang/ Mei", ScriptTag.ROMANIZED, True, settings)
    assert form.lang == "zh-Latn"
    assert _pairs(form)[0] == (NamePartType.SUFFIX, "Furen")

    fone = synthesize_variant("Mei", ScriptTag.PHONETIC, True, settings)
    assert _pairs(fone) == [(NamePartType.SUFFIX, "夫人")]
