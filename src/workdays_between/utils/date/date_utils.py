"""
Date token scanning, per-format parsing, and day arithmetic helpers.

Pure functions — no configuration, no I/O.
"""
import re
import calendar
from datetime import date

from ...constants.date_formats import DateFormat, MONTH_MAP


# Modified Julian Day 0 is 1858-11-17
MJD_EPOCH_ORDINAL = date(1858, 11, 17).toordinal()

DEFAULT_SHORT_YEAR_PIVOT = 69


# ── Token scanning ────────────────────────────────────────────────
# One alternation so matches never overlap. A numeric token may not be
# preceded by a digit or by its own separator, so a dash between two
# slash dates still splits them.

DATE_TOKEN_PATTERN = re.compile(
    r'(?<![\d/])\d{1,2}/\d{1,2}/\d{2,4}(?![\d/])'
    r'|(?<![\d\-])\d{1,2}-\d{1,2}-\d{2,4}(?![\d\-])'
    r'|(?<![\d.])\d{1,2}\.\d{1,2}\.\d{2,4}(?!\.?\d)'
    r'|\b(?:january|february|march|april|may|june|july|august'
    r'|september|october|november|december'
    r'|jan|feb|mar|apr|jun|jul|aug|sep|oct|nov|dec)'
    r'\s+\d{1,2},?\s+(?:\d{4}|\d{2})(?!\d)',
    re.IGNORECASE,
)


def find_date_tokens(
        text: str ) -> list[str]:

    """
    Collect every date-shaped substring in text, left to right.

    Args:
        text: Raw query text

    Returns:
        Matched substrings, possibly empty
    """

    if not text or not text.strip():
        return []

    return [match.group(0) for match in DATE_TOKEN_PATTERN.finditer(text)]


def token_year_digits(
        token: str ) -> int:

    """4 when the token ends in a 4-digit year, otherwise 2."""

    return 4 if re.search(r'(?<!\d)\d{4}$', token.strip()) else 2


# ── Parsing ───────────────────────────────────────────────────────

def expand_short_year(
        year: int,
        pivot: int = DEFAULT_SHORT_YEAR_PIVOT ) -> int:

    """
    Expand a 2-digit year around the pivot.

    With the default pivot of 69: 00–68 → 2000s, 69–99 → 1900s.
    """

    return year + (1900 if year >= pivot else 2000)


def try_parse_token(
        token: str,
        fmt: DateFormat,
        pivot: int = DEFAULT_SHORT_YEAR_PIVOT ) -> date | None:

    """
    Attempt one format against one token.

    Returns the calendar date, or None when the token does not have the
    format's shape or names a day that does not exist.
    """

    match = fmt.pattern.fullmatch(token.strip())
    if not match:
        return None

    first, second, year_str = match.groups()

    if fmt.order == "month_first":
        month, day = int(first), int(second)
    elif fmt.order == "day_first":
        day, month = int(first), int(second)
    else:
        month = MONTH_MAP.get(first.lower(), 0)
        day   = int(second)

    year = int(year_str)
    if fmt.year_digits == 2:
        year = expand_short_year(year, pivot)

    if not _is_valid_ymd(year, month, day):
        return None

    return date(year, month, day)


# ── Arithmetic and formatting ─────────────────────────────────────

def modified_julian_day(
        value: date ) -> int:

    """Absolute day count used for ordering and span length."""

    return value.toordinal() - MJD_EPOCH_ORDINAL


def format_answer_date(
        value: date,
        date_format: str = "%b %d, %Y" ) -> str:

    return value.strftime(date_format)


# ── Private helpers ───────────────────────────────────────────────

def _is_valid_ymd(
        year: int,
        month: int,
        day: int ) -> bool:

    if not 1 <= year <= 9999:
        return False

    if not 1 <= month <= 12:
        return False

    return 1 <= day <= calendar.monthrange(year, month)[1]
