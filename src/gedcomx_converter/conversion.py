"""
Tree-level conversion: walk the level-0 records and hand each one to its
mapper.

    tree = load_tree("family.ged")
    result = convert_tree(tree)
    result.persons[0].names[0].preferred  # True
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from gedcomx_converter.core.context import ConversionContext
from gedcomx_converter.loader import GedcomTree, load_tree
from gedcomx_converter.logging import get_logger
from gedcomx_converter.mapping.person import PersonMapper, PostProcessor
from gedcomx_converter.mapping.result import ConversionResult
from gedcomx_converter.mapping.sources import CitationResolver, SourceMapper
from gedcomx_converter.mapping.submitter import SubmitterMapper
from gedcomx_converter.records.readers import read_person, read_source, read_submitter

log = get_logger(__name__)

CONVERTED_RECORDS = {"INDI", "SUBM", "SOUR"}


def convert_tree(
    tree: GedcomTree,
    config: Any = None,
    ctx: Optional[ConversionContext] = None,
    *,
    post_processor: Optional[PostProcessor] = None,
    resolver: Optional[CitationResolver] = None,
) -> ConversionResult:
    """
    Convert INDI, SUBM and SOUR records; other record types are left to
    other converters and skipped quietly.
    """
    ctx = ctx if ctx is not None else ConversionContext(logger=log)
    result = ConversionResult()

    source_mapper = SourceMapper(resolver)
    person_mapper = PersonMapper(config, post_processor, source_mapper)
    submitter_mapper = SubmitterMapper(config)

    for record in tree:
        if record.tag not in CONVERTED_RECORDS:
            continue

        if not record.pointer:
            ctx.warn("%s record without xref at line %d skipped.", record.tag, record.lineno)
            continue

        if record.tag == "INDI":
            person_mapper.to_person(read_person(record), result, ctx)
        elif record.tag == "SOUR":
            source_mapper.to_source_description(read_source(record), result)
        elif result.dataset_contributor is None:
            submitter_mapper.to_contributor(read_submitter(record), result, ctx)
        else:
            ctx.warn("Additional submitter %s ignored.", record.pointer)

    result.diagnostics = list(ctx.diagnostics)
    log.info(
        "Converted %d persons, %d source descriptions (%d warnings)",
        len(result.persons),
        len(result.source_descriptions),
        len(result.diagnostics),
    )
    return result


def convert_file(path: Union[str, Path], config: Any = None, **kwargs: Any) -> ConversionResult:
    """Load a GEDCOM file and convert it."""
    return convert_tree(load_tree(path), config, **kwargs)
