from .extraction_error import DateExtractionError, NoDatesFoundError, IncompleteParseError

__all__ = [
    'DateExtractionError',
    'NoDatesFoundError',
    'IncompleteParseError',
]
