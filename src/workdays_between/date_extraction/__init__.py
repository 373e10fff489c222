"""Date extraction — two dates, one shared day/month convention."""

from .date_extractor import DateExtractor
from ._dataclass.parsed_date import ParsedDate
from ._dataclass.extraction_result import ExtractionResult, PassResult
from ._errors.extraction_error import (
    DateExtractionError,
    NoDatesFoundError,
    IncompleteParseError,
)

__all__ = [
    'DateExtractor',
    'ParsedDate',
    'ExtractionResult',
    'PassResult',
    'DateExtractionError',
    'NoDatesFoundError',
    'IncompleteParseError',
]
