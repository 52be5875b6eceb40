"""
Mappers from raw GEDCOM records to the conclusion model.
"""

from .facts import fact_from, ordinance_from
from .ids import create_id
from .person import PersonMapper
from .result import ConversionResult
from .sources import SourceMapper
from .submitter import SubmitterMapper

__all__ = [
    "ConversionResult",
    "PersonMapper",
    "SourceMapper",
    "SubmitterMapper",
    "create_id",
    "fact_from",
    "ordinance_from",
]
