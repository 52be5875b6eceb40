"""
NAME structure -> ordered list of conclusion Names.

One RawName yields, in order:
  1. the primary Name: primary form, then FONE form, then ROMN form
  2. a Nickname Name       (NICK)
  3. a MarriedName Name    (_MARNM)
  4. an AlsoKnownAs Name   (_AKA / _AKAN / ALIA)

Only the primary Name receives the NAME-level source references. The
preferred flag goes on the first Name when the caller says this is the
person's first name entry.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from gedcomx_converter.core.context import ConversionContext
from gedcomx_converter.model.conclusion import Name, NameForm, NameType, ScriptTag, SourceReference
from gedcomx_converter.names.parts import has_suffix, name_parts_for
from gedcomx_converter.names.settings import DEFAULT_SETTINGS, NameSettings
from gedcomx_converter.names.slashes import normalize_name_value
from gedcomx_converter.names.variants import synthesize_variant
from gedcomx_converter.records.raw import RawCitation, RawName

SourceResolver = Callable[[Sequence[RawCitation]], List[SourceReference]]


def primary_form(raw: RawName, settings: NameSettings) -> NameForm:
    return NameForm(
        script=ScriptTag.PRIMARY,
        lang=settings.lang_for(ScriptTag.PRIMARY),
        full_text=normalize_name_value(raw.value),
        parts=name_parts_for(raw),
    )


def _typed_name(value: str, name_type: NameType, settings: NameSettings) -> Name:
    form = NameForm(
        script=ScriptTag.PRIMARY,
        lang=settings.lang_for(ScriptTag.PRIMARY),
        full_text=value,
    )
    return Name(type=name_type, name_forms=[form])


def _report_ignored(raw: RawName, ctx: ConversionContext) -> None:
    if raw.type is not None and raw.type.strip():
        with ctx.scope(raw.type_tag or "Undetermined"):
            ctx.warn("Name type (%s) was ignored.", raw.type)

    if raw.note_count:
        ctx.warn("Did not process %d notes or references to notes.", raw.note_count)
    if raw.media_count:
        ctx.warn("Did not process %d media items or references to media items.", raw.media_count)
    for ext in raw.extensions:
        ctx.warn("Unsupported (%s): %s", ext.tag, ext)


def assemble_names(
    raw: Optional[RawName],
    ctx: Optional[ConversionContext] = None,
    *,
    is_first: bool = False,
    settings: Optional[NameSettings] = None,
    resolve_sources: Optional[SourceResolver] = None,
) -> List[Name]:
    """Decompose one NAME structure into its Names. ``None`` yields ``[]``."""
    if raw is None:
        return []

    settings = settings or DEFAULT_SETTINGS
    ctx = ctx if ctx is not None else ConversionContext()

    primary = primary_form(raw, settings)
    female_suffix = has_suffix(primary.parts, settings.female_honorific)

    name = Name(name_forms=[primary])
    if raw.fone is not None:
        name.name_forms.append(
            synthesize_variant(raw.fone, ScriptTag.PHONETIC, female_suffix, settings)
        )
    if raw.romn is not None:
        name.name_forms.append(
            synthesize_variant(raw.romn, ScriptTag.ROMANIZED, female_suffix, settings)
        )

    names: List[Name] = [name]
    if raw.nickname is not None:
        names.append(_typed_name(raw.nickname, NameType.NICKNAME, settings))
    if raw.married_name is not None:
        names.append(_typed_name(raw.married_name, NameType.MARRIED_NAME, settings))
    if raw.aka is not None:
        names.append(_typed_name(raw.aka, NameType.ALSO_KNOWN_AS, settings))

    if raw.citations and resolve_sources is not None:
        name.sources = resolve_sources(raw.citations)

    if is_first:
        names[0].preferred = True

    _report_ignored(raw, ctx)
    return names
