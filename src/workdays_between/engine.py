"""
Workdays engine that chains trigger stripping, date extraction, and counting
"""
import re

from .constants.triggers import strip_trigger
from .date_extraction.date_extractor import DateExtractor
from .pipeline_config import PipelineConfig
from .workdays.workday_calculator import WorkdaySpanCalculator
from .workdays._dataclass.answer_result import AnswerResult


class WorkdaysEngine:
    """
    Text in, answer out
    Stage 1: DateExtractor (two dates, consistent ordering)
    Stage 2: WorkdaySpanCalculator (closed-form count + sentence)
    """

    def __init__(self, config: PipelineConfig | None = None):
        self.config = config or PipelineConfig()
        if not self.config.inclusive_keyword.strip():
            raise ValueError("inclusive_keyword must not be empty")
        self.extractor = DateExtractor(short_year_pivot=self.config.short_year_pivot)
        self.calculator = WorkdaySpanCalculator(date_format=self.config.answer_date_format)
        self._inclusive_re = re.compile(
            rf'\b{re.escape(self.config.inclusive_keyword)}\b', re.IGNORECASE
        )

    def is_inclusive(self, text: str) -> bool:
        """True when the inclusive keyword appears anywhere as a whole word"""
        return bool(text) and bool(self._inclusive_re.search(text))

    def answer(self, query: str, logger=None) -> AnswerResult | None:
        """
        Answer one query

        Args:
            query: Raw query, with or without a leading trigger phrase
            logger: Optional logger with .info() / .debug()

        Returns:
            AnswerResult, or None when the query has no answer
        """
        remainder = strip_trigger(query)
        dates = self.extractor.extract(remainder, logger=logger)

        if dates is None:
            return None

        start, end = dates
        result = self.calculator.span(
            start, end, inclusive=self.is_inclusive(remainder), logger=logger
        )

        if logger:
            logger.info(f'[Workdays] {result.text}')

        return result

    def answer_text(self, query: str, logger=None) -> str | None:
        """Rendered sentence, or None"""
        result = self.answer(query, logger=logger)
        return result.text if result else None
