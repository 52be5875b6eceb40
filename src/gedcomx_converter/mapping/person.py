"""
INDI record -> conclusion Person.

Names, facts, gender, LDS ordinances, sources and reference numbers are
converted; every other populated field is reported through the
ConversionContext and otherwise dropped.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from gedcomx_converter.core.context import ConversionContext
from gedcomx_converter.logging import get_logger
from gedcomx_converter.mapping.facts import TEMPLE_CODE_QUALIFIER, fact_from, ordinance_from
from gedcomx_converter.mapping.ids import create_id
from gedcomx_converter.mapping.result import ConversionResult
from gedcomx_converter.mapping.sources import SourceMapper
from gedcomx_converter.model.conclusion import (
    Gender,
    GenderType,
    Identifier,
    Name,
    OrdinanceRecord,
    Person,
)
from gedcomx_converter.names.assembler import assemble_names
from gedcomx_converter.names.settings import NameSettings
from gedcomx_converter.records.raw import RawFact, RawOrdinance, RawPerson

log = get_logger(__name__)

USER_REFERENCE_NUMBER = "USER_REFERENCE_NUMBER"

GENDER_TOKENS = {
    "M": GenderType.MALE,
    "F": GenderType.FEMALE,
    "U": GenderType.UNKNOWN,
}

PostProcessor = Callable[[RawPerson, Person], None]


class PersonMapper:
    def __init__(
        self,
        config: Any = None,
        post_processor: Optional[PostProcessor] = None,
        source_mapper: Optional[SourceMapper] = None,
    ):
        self.config = config
        self.post_processor = post_processor
        self.source_mapper = source_mapper or SourceMapper()
        self.name_settings = NameSettings.from_config(config) if config is not None else NameSettings()

    # ------------------------------------------------------------------ #
    # Entry point
    # ------------------------------------------------------------------ #

    def to_person(
        self,
        raw: Optional[RawPerson],
        result: ConversionResult,
        ctx: ConversionContext,
    ) -> Optional[Person]:
        if raw is None:
            return None

        with ctx.scope(f"@{raw.id}@ INDI"):
            person = Person(id=create_id(raw.id, self.config))

            def resolve(citations):
                return self.source_mapper.references_from(citations, result)

            names = self._process_names(raw, ctx, resolve)
            if names:
                person.names = names

            self._process_facts(person, raw.facts, ctx, resolve)
            self._process_ordinances(person, raw.ordinances, ctx)

            person.sources = resolve(raw.citations)

            for each in raw.reference_numbers:
                person.identifiers.append(Identifier(value=each, type=USER_REFERENCE_NUMBER))

            self._report_ignored(raw, ctx)

            if self.post_processor is not None:
                self.post_processor(raw, person)

            result.add_person(person)
            log.debug("Converted person %s with %d names", person.id, len(person.names))
            return person

    # ------------------------------------------------------------------ #
    # Names
    # ------------------------------------------------------------------ #

    def _process_names(self, raw: RawPerson, ctx: ConversionContext, resolve) -> List[Name]:
        names: List[Name] = []
        for index, raw_name in enumerate(raw.names, start=1):
            with ctx.scope(f"NAME.{index}"):
                names.extend(
                    assemble_names(
                        raw_name,
                        ctx,
                        is_first=not names,
                        settings=self.name_settings,
                        resolve_sources=resolve,
                    )
                )
        return names

    # ------------------------------------------------------------------ #
    # Facts and gender
    # ------------------------------------------------------------------ #

    def _process_facts(self, person: Person, facts: List[RawFact], ctx: ConversionContext, resolve) -> None:
        for index, raw_fact in enumerate(facts, start=1):
            with ctx.scope(f"{raw_fact.tag}.{index}"):
                fact = fact_from(raw_fact, resolve)
                if fact is not None:
                    person.facts.append(fact)
                elif (raw_fact.tag or "").upper() == "SEX":
                    self._process_sex(person, raw_fact, ctx)
                else:
                    ctx.warn("Unsupported fact (%s) was ignored.", raw_fact.tag)

    def _process_sex(self, person: Person, raw_fact: RawFact, ctx: ConversionContext) -> None:
        token = (raw_fact.value or "").strip().upper()
        gender_type = GENDER_TOKENS.get(token)

        if gender_type is None:
            ctx.warn("Unrecognized gender designation (%s)", raw_fact.value)
            return

        if person.gender is not None:
            ctx.warn("Additional gender designation (%s) ignored.", raw_fact.value)
            return

        person.gender = Gender(type=gender_type)

    # ------------------------------------------------------------------ #
    # Ordinances
    # ------------------------------------------------------------------ #

    def _process_ordinances(self, person: Person, ordinances: List[RawOrdinance], ctx: ConversionContext) -> None:
        for index, raw_ordinance in enumerate(ordinances, start=1):
            with ctx.scope(f"{raw_ordinance.tag}.{index}"):
                fact = ordinance_from(raw_ordinance)
                ordinance = OrdinanceRecord(type=fact.type, complete_date=fact.date)

                if not fact.date or len(fact.date) < 5:
                    ctx.warn("Missing date for %s ordinance: %s", person.id, fact.type)

                qualifiers = fact.qualifiers or []
                if not qualifiers:
                    ctx.warn(
                        "Missing qualifier (status or temple code) for %s ordinance: %s",
                        person.id,
                        fact.type,
                    )
                elif len(qualifiers) == 1:
                    if qualifiers[0].name == TEMPLE_CODE_QUALIFIER:
                        ordinance.temple_code = qualifiers[0].value
                    else:
                        ordinance.status = qualifiers[0].name
                else:
                    ordinance.temple_code = qualifiers[0].value
                    ordinance.status = qualifiers[1].name

                person.extensions.append(ordinance)

    # ------------------------------------------------------------------ #
    # Fields we do not convert
    # ------------------------------------------------------------------ #

    def _report_ignored(self, raw: RawPerson, ctx: ConversionContext) -> None:
        if raw.associations:
            ctx.warn("Associations ignored.")
        if raw.record_file_number is not None:
            ctx.warn("Record file number ignored: %s", raw.record_file_number)
        if raw.ancestor_interest is not None:
            ctx.warn("Ancestor interest ignored: %s.", raw.ancestor_interest)
        if raw.descendant_interest is not None:
            ctx.warn("Descendant interest ignored: %s.", raw.descendant_interest)
        if raw.address is not None:
            ctx.warn("Address was ignored: %s", " ".join(raw.address.split()))
        if raw.email is not None:
            ctx.warn("e-mail (%s) was ignored.", raw.email)
        if raw.fax is not None:
            ctx.warn("fax (%s) was ignored.", raw.fax)
        if raw.phone is not None:
            ctx.warn("phone (%s) was ignored.", raw.phone)
        if raw.www is not None:
            ctx.warn("www (%s) was ignored.", raw.www)
        if raw.uid is not None:
            with ctx.scope(raw.uid_tag or "UID"):
                ctx.warn("UID (%s) was ignored.", raw.uid)
        if raw.rin is not None:
            ctx.warn("RIN (%s) was ignored.", raw.rin)
        if raw.note_count:
            ctx.warn("Did not process %d notes or references to notes.", raw.note_count)
        if raw.media_count:
            ctx.warn("Did not process %d media items or references to media items.", raw.media_count)
        for ext in raw.extensions:
            ctx.warn("Unsupported (%s): %s", ext.tag, ext)
