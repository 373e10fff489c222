from .date.date_utils import (
    find_date_tokens, try_parse_token, modified_julian_day, format_answer_date
)


__all__ = [
    "find_date_tokens",
    "try_parse_token",
    "modified_julian_day",
    "format_answer_date",
]
