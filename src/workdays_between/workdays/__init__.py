"""Workday arithmetic and answer rendering"""

from .workday_calculator import WorkdaySpanCalculator, pluralize_workdays
from ._dataclass.answer_result import AnswerResult

__all__ = [
    'WorkdaySpanCalculator',
    'pluralize_workdays',
    'AnswerResult',
]
