"""
FONE / ROMN name variants.

Variant fields follow a looser slash convention than NAME values, so the
shape is decided by how many slash-separated segments the text has rather
than by what surrounds each slash:

    "伝右エ門//"            given only           -> Given 伝右エ門
    "/Yoshimura/ Takichi"  /surname/ given      -> Surname Yoshimura, Given Takichi
    "Yoshimura/Takichi"    two segments         -> Given Takichi
    anything else          no structure         -> full text only
"""

from __future__ import annotations

from typing import List, Optional

from gedcomx_converter.model.conclusion import NameForm, NamePart, NamePartType, ScriptTag
from gedcomx_converter.names.settings import DEFAULT_SETTINGS, NameSettings
from gedcomx_converter.names.slashes import GIVEN_ONLY_MARKER


def split_segments(text: str) -> List[str]:
    """Split on ``/`` dropping trailing empty segments (``"/A/"`` -> ``["", "A"]``)."""
    segments = text.split("/")
    while segments and segments[-1] == "":
        segments.pop()
    return segments


def _append(parts: List[NamePart], part_type: NamePartType, value: Optional[str]) -> None:
    value = (value or "").strip()
    if value:
        parts.append(NamePart(type=part_type, value=value))


def synthesize_variant(
    text: str,
    script: ScriptTag,
    female_suffix: bool = False,
    settings: Optional[NameSettings] = None,
) -> NameForm:
    """
    Build the NameForm for a phonetic or romanized variant.

    When ``female_suffix`` is set the form starts with a Suffix part holding
    the honorific translated for ``script``.
    """
    settings = settings or DEFAULT_SETTINGS

    parts: List[NamePart] = []
    if female_suffix:
        parts.append(NamePart(type=NamePartType.SUFFIX, value=settings.honorific_for(script)))

    full_text = text
    if GIVEN_ONLY_MARKER in text:
        _append(parts, NamePartType.GIVEN, text.replace(GIVEN_ONLY_MARKER, ""))
    elif "/" in text:
        segments = split_segments(text)
        if len(segments) == 3:
            _append(parts, NamePartType.SURNAME, segments[1])
            _append(parts, NamePartType.GIVEN, segments[2])
            full_text = text.replace("/", "")
        elif len(segments) == 2:
            _append(parts, NamePartType.GIVEN, segments[1])
            full_text = text.replace("/", "")

    return NameForm(
        script=script,
        lang=settings.lang_for(script),
        full_text=full_text,
        parts=parts or None,
    )
