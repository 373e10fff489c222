"""Ordered date format trial list"""
import re
from dataclasses import dataclass


MONTH_MAP = {
    'january': 1, 'jan': 1, 'february': 2, 'feb': 2,
    'march': 3, 'mar': 3, 'april': 4, 'apr': 4,
    'may': 5, 'june': 6, 'jun': 6, 'july': 7, 'jul': 7,
    'august': 8, 'aug': 8, 'september': 9, 'sep': 9,
    'october': 10, 'oct': 10, 'november': 11, 'nov': 11,
    'december': 12, 'dec': 12,
}

_ABBR_MONTHS = r'(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)'
_FULL_MONTHS = (
    r'(january|february|march|april|may|june|july|august'
    r'|september|october|november|december)'
)


@dataclass(frozen=True)
class DateFormat:
    """One entry of the ordered trial list"""

    name:        str
    pattern:     re.Pattern
    order:       str            # month_first, day_first, textual
    year_digits: int            # 2 or 4


def _numeric(order: str, sep: str, year_digits: int) -> DateFormat:

    """Build a numeric D/M/Y style format for one separator and year width"""

    first, second = ("M", "D") if order == "month_first" else ("D", "M")
    y_label       = "YYYY" if year_digits == 4 else "YY"
    name          = f"{first}{sep}{second}{sep}{y_label}"
    pattern       = re.compile(
        rf'(\d{{1,2}}){re.escape(sep)}(\d{{1,2}}){re.escape(sep)}(\d{{{year_digits}}})'
    )

    return DateFormat(name=name, pattern=pattern, order=order, year_digits=year_digits)


def _textual(month_group: str, label: str, comma: bool, year_digits: int) -> DateFormat:

    """Build a 'Month Day[,] Year' format"""

    y_label = "YYYY" if year_digits == 4 else "YY"
    name    = f"{label} D{',' if comma else ''} {y_label}"
    sep     = r',\s*' if comma else r'\s+'
    pattern = re.compile(
        rf'{month_group}\s+(\d{{1,2}}){sep}(\d{{{year_digits}}})',
        re.IGNORECASE,
    )

    return DateFormat(name=name, pattern=pattern, order="textual", year_digits=year_digits)


# ── Trial order ───────────────────────────────────────────────────
# Month-first numeric, then day-first numeric, then textual.
# Each entry exists in a 4-digit and a 2-digit year variant; the token's
# own year length decides which variant is tried.

MONTH_FIRST_FORMATS: list[DateFormat] = [
    _numeric("month_first", sep, digits)
    for sep in ("/", "-", ".")
    for digits in (4, 2)
]

DAY_FIRST_FORMATS: list[DateFormat] = [
    _numeric("day_first", sep, digits)
    for sep in ("/", "-", ".")
    for digits in (4, 2)
]

TEXTUAL_FORMATS: list[DateFormat] = [
    _textual(group, label, comma, digits)
    for group, label in ((_ABBR_MONTHS, "Mon"), (_FULL_MONTHS, "Month"))
    for comma in (False, True)
    for digits in (4, 2)
]

DATE_FORMATS: list[DateFormat] = MONTH_FIRST_FORMATS + DAY_FIRST_FORMATS + TEXTUAL_FORMATS
