"""Workdays constants"""

from .date_formats import (
    DateFormat,
    DATE_FORMATS,
    MONTH_FIRST_FORMATS,
    DAY_FIRST_FORMATS,
    TEXTUAL_FORMATS,
    MONTH_MAP,
)
from .triggers import TRIGGER_PHRASES, matches_trigger, strip_trigger

__all__ = [
    'DateFormat',
    'DATE_FORMATS',
    'MONTH_FIRST_FORMATS',
    'DAY_FIRST_FORMATS',
    'TEXTUAL_FORMATS',
    'MONTH_MAP',
    'TRIGGER_PHRASES',
    'matches_trigger',
    'strip_trigger',
]
