from .conclusion import (
    Agent,
    Fact,
    Gender,
    GenderType,
    Identifier,
    Name,
    NameForm,
    NamePart,
    NamePartType,
    NameType,
    OrdinanceRecord,
    Person,
    Qualifier,
    ScriptTag,
    SourceDescription,
    SourceReference,
)

__all__ = [
    "Agent",
    "Fact",
    "Gender",
    "GenderType",
    "Identifier",
    "Name",
    "NameForm",
    "NamePart",
    "NamePartType",
    "NameType",
    "OrdinanceRecord",
    "Person",
    "Qualifier",
    "ScriptTag",
    "SourceDescription",
    "SourceReference",
]
