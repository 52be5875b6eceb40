# ---------------------------------------------------------------------------
# GEDCOM 5.5 / 5.5.1 tag vocabularies used by the readers and fact mapper
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Dict

GEDCOMX = "http://gedcomx.org/"
FAMILYSEARCH = "http://familysearch.org/v1/"

# Individual events and attributes -> GEDCOM X fact types
FACT_TYPE_MAP: Dict[str, str] = {
    "BIRT": GEDCOMX + "Birth",
    "CHR": GEDCOMX + "Christening",
    "CHRA": GEDCOMX + "AdultChristening",
    "BAPM": GEDCOMX + "Baptism",
    "BARM": GEDCOMX + "BarMitzvah",
    "BASM": GEDCOMX + "BatMitzvah",
    "BLES": GEDCOMX + "Blessing",
    "ADOP": GEDCOMX + "Adoption",
    "CONF": GEDCOMX + "Confirmation",
    "FCOM": GEDCOMX + "FirstCommunion",
    "GRAD": GEDCOMX + "Graduation",
    "ORDN": GEDCOMX + "Ordination",
    "EMIG": GEDCOMX + "Emigration",
    "IMMI": GEDCOMX + "Immigration",
    "NATU": GEDCOMX + "Naturalization",
    "CENS": GEDCOMX + "Census",
    "PROB": GEDCOMX + "Probate",
    "WILL": GEDCOMX + "Will",
    "RETI": GEDCOMX + "Retirement",
    "DEAT": GEDCOMX + "Death",
    "BURI": GEDCOMX + "Burial",
    "CREM": GEDCOMX + "Cremation",
    "CAST": GEDCOMX + "Caste",
    "DSCR": GEDCOMX + "PhysicalDescription",
    "EDUC": GEDCOMX + "Education",
    "IDNO": GEDCOMX + "NationalId",
    "SSN": GEDCOMX + "NationalId",
    "NATI": GEDCOMX + "Nationality",
    "NCHI": GEDCOMX + "NumberOfChildren",
    "NMR": GEDCOMX + "NumberOfMarriages",
    "OCCU": GEDCOMX + "Occupation",
    "PROP": GEDCOMX + "Property",
    "RELI": GEDCOMX + "Religion",
    "RESI": GEDCOMX + "Residence",
    "TITL": GEDCOMX + "NobilityTitle",
    "_MILT": GEDCOMX + "MilitaryService",
}

# Generic containers whose meaning comes from their TYPE child
GENERIC_FACT_TAGS = {"EVEN", "FACT"}

# Read as facts even though the fact mapper does not convert them
SPECIAL_FACT_TAGS = {"SEX"}

FACT_TAGS = set(FACT_TYPE_MAP) | GENERIC_FACT_TAGS | SPECIAL_FACT_TAGS

ORDINANCE_TYPE_MAP: Dict[str, str] = {
    "BAPL": FAMILYSEARCH + "LdsBaptism",
    "CONL": FAMILYSEARCH + "LdsConfirmation",
    "ENDL": FAMILYSEARCH + "LdsEndowment",
    "INIL": FAMILYSEARCH + "LdsInitiatory",
    "SLGC": FAMILYSEARCH + "LdsSealingChildToParents",
}

# NAME substructure tags the readers model explicitly
NAME_TAGS = {
    "NPFX", "GIVN", "SURN", "NSFX", "FONE", "ROMN", "NICK",
    "_MARNM", "_AKA", "_AKAN", "ALIA", "TYPE", "_TYPE",
    "SOUR", "NOTE", "OBJE",
}
AKA_TAGS = ("_AKA", "_AKAN", "ALIA")
NAME_TYPE_TAGS = ("TYPE", "_TYPE")

EMAIL_TAGS = ("EMAIL", "_EMAIL")
WWW_TAGS = ("WWW", "_URL", "_WWW")
UID_TAGS = ("_UID", "UID")

# INDI tags handled by other parts of the pipeline, never reported
STRUCTURAL_PERSON_TAGS = {"FAMS", "FAMC", "SUBM"}

PERSON_TAGS = (
    {"NAME", "SOUR", "REFN", "ASSO", "RFN", "ANCI", "DESI", "ADDR",
     "FAX", "PHON", "RIN", "CHAN", "NOTE", "OBJE"}
    | set(EMAIL_TAGS) | set(WWW_TAGS) | set(UID_TAGS)
    | FACT_TAGS | set(ORDINANCE_TYPE_MAP) | STRUCTURAL_PERSON_TAGS
)

SUBMITTER_TAGS = {"NAME", "ADDR", "PHON", "FAX", "LANG", "RIN", "CHAN"} | set(EMAIL_TAGS) | set(WWW_TAGS)


def is_fact_tag(tag: str) -> bool:
    return bool(tag) and tag.upper() in FACT_TAGS


def is_ordinance_tag(tag: str) -> bool:
    return bool(tag) and tag.upper() in ORDINANCE_TYPE_MAP
