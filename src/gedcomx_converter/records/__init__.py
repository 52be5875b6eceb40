from .raw import (
    ExtensionTag,
    RawCitation,
    RawFact,
    RawName,
    RawOrdinance,
    RawPerson,
    RawSource,
    RawSubmitter,
)
from .readers import read_citation, read_name, read_person, read_source, read_submitter

__all__ = [
    "ExtensionTag",
    "RawCitation",
    "RawFact",
    "RawName",
    "RawOrdinance",
    "RawPerson",
    "RawSource",
    "RawSubmitter",
    "read_citation",
    "read_name",
    "read_person",
    "read_source",
    "read_submitter",
]
