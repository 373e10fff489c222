"""Workdays-between package: two dates out of free text, workdays between them"""

# Pipeline
from .engine import WorkdaysEngine
from .pipeline_config import PipelineConfig, load_config

# Constants
from .constants import TRIGGER_PHRASES, matches_trigger, strip_trigger

# Date extraction
from .date_extraction.date_extractor import DateExtractor
from .date_extraction._dataclass.parsed_date import ParsedDate
from .date_extraction._dataclass.extraction_result import ExtractionResult, PassResult
from .date_extraction._errors.extraction_error import (
    DateExtractionError,
    NoDatesFoundError,
    IncompleteParseError,
)

# Workdays
from .workdays.workday_calculator import WorkdaySpanCalculator, pluralize_workdays
from .workdays._dataclass.answer_result import AnswerResult

__all__ = [
    # Pipeline
    'WorkdaysEngine',
    'PipelineConfig',
    'load_config',

    # Constants
    'TRIGGER_PHRASES',
    'matches_trigger',
    'strip_trigger',

    # Date extraction
    'DateExtractor',
    'ParsedDate',
    'ExtractionResult',
    'PassResult',
    'DateExtractionError',
    'NoDatesFoundError',
    'IncompleteParseError',

    # Workdays
    'WorkdaySpanCalculator',
    'pluralize_workdays',
    'AnswerResult',
]
