from .parsed_date import ParsedDate
from .extraction_result import ExtractionResult, PassResult

__all__ = [
    'ParsedDate',
    'ExtractionResult',
    'PassResult',
]
