"""Failures raised while pulling a date pair out of text"""


class DateExtractionError(Exception):
    """Base class — the query yields no answer"""

    reason = "extraction_failed"

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class NoDatesFoundError(DateExtractionError):
    """Text does not contain exactly two date-shaped tokens"""

    reason = "no_dates_found"


class IncompleteParseError(DateExtractionError):
    """Two tokens found, but fewer than two resolve to dates"""

    reason = "incomplete_parse"
