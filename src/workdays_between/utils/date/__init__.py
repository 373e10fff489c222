"""Date utilities — token scanning, parsing, day arithmetic."""

from .date_utils import (
    DATE_TOKEN_PATTERN,
    find_date_tokens,
    token_year_digits,
    expand_short_year,
    try_parse_token,
    modified_julian_day,
    format_answer_date,
)

__all__ = [
    'DATE_TOKEN_PATTERN',
    'find_date_tokens',
    'token_year_digits',
    'expand_short_year',
    'try_parse_token',
    'modified_julian_day',
    'format_answer_date',
]
