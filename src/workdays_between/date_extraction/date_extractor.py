"""
Two-date extraction for workday queries.

Pass 1: month-first numeric → day-first numeric → textual
Pass 2: day-first numeric → textual   (only when pass 1 saw a day-first token)

Both numeric dates in a pair always share one day/month ordering.
"""
import time

from ..constants.date_formats import (
    DateFormat,
    DATE_FORMATS,
)
from ..utils.date.date_utils import (
    DEFAULT_SHORT_YEAR_PIVOT,
    find_date_tokens,
    token_year_digits,
    try_parse_token,
)
from ._dataclass.parsed_date import ParsedDate
from ._dataclass.extraction_result import ExtractionResult, PassResult
from ._errors.extraction_error import (
    DateExtractionError,
    NoDatesFoundError,
    IncompleteParseError,
)


DAY_FIRST_ONLY_FORMATS: list[DateFormat] = [
    fmt for fmt in DATE_FORMATS if fmt.order != "month_first"
]


class DateExtractor:

    """
    Pull exactly two dates out of free text and order them.

    Holds only the short-year pivot, so one instance can serve any
    number of concurrent calls.
    """

    def __init__(self,
            short_year_pivot: int = DEFAULT_SHORT_YEAR_PIVOT ) -> None:

        self.short_year_pivot = short_year_pivot


    def extract(self,
            text: str,
            logger=None ) -> tuple[ParsedDate, ParsedDate] | None:

        """
        Extract the (start, end) pair, or None when the text has no answer.

        Args:
            text:   Raw query text (trigger phrase already removed or not)
            logger: Optional logger with .info() / .debug()

        Returns:
            (earlier, later) ParsedDate pair, or None
        """

        return self.extract_detailed(text, logger=logger).pair()


    def extract_detailed(self,
            text: str,
            logger=None ) -> ExtractionResult:

        """
        Run extraction and keep every intermediate step.

        Never raises for malformed input; failures are recorded in
        ExtractionResult.failure.
        """

        result = ExtractionResult(text=text)

        try:
            self._run(text, result, logger)
        except DateExtractionError as e:
            result.failure = e.reason
            if logger:
                logger.info(f'[DateExtractor] No answer ({e.reason}): {e}')

        return result


    def parse(self,
            text: str,
            logger=None ) -> tuple[ParsedDate, ParsedDate]:

        """
        Strict variant of extract().

        Raises:
            NoDatesFoundError:    text does not hold exactly two date tokens
            IncompleteParseError: fewer than two tokens resolved to dates
        """

        result = ExtractionResult(text=text)
        self._run(text, result, logger)

        return result.start, result.end


    # ── Core ──────────────────────────────────────────────────────

    def _run(self,
            text: str,
            result: ExtractionResult,
            logger=None ) -> None:

        def log(msg: str) -> None:
            if logger:
                logger.debug(msg)

        tokens        = find_date_tokens(text)
        result.tokens = tokens

        if len(tokens) != 2:
            raise NoDatesFoundError(
                f'expected 2 date tokens, found {len(tokens)}', text=text,
            )

        log(f'[DateExtractor] Tokens: {tokens}')

        # ── Pass 1: all formats ───────────────────────────────────
        first = self._run_pass("default", tokens, DATE_FORMATS)
        result.passes.append(first)
        log(f'[DateExtractor] Pass 1 — {len(first.dates)} dates, day_first={first.day_first}')

        final = first

        # ── Pass 2: day-first only ────────────────────────────────
        if first.day_first:
            second = self._run_pass("day_first", tokens, DAY_FIRST_ONLY_FORMATS)
            result.passes.append(second)
            result.day_first = True
            log(f'[DateExtractor] Pass 2 — {len(second.dates)} dates')

            final = second

        if len(final.dates) != 2:
            raise IncompleteParseError(
                f'only {len(final.dates)} of 2 tokens parsed', text=text,
            )

        result.start, result.end = sorted(final.dates)


    def _run_pass(self,
            name: str,
            tokens: list[str],
            formats: list[DateFormat] ) -> PassResult:

        """Parse every token against one ordered format list."""

        start  = time.perf_counter()
        result = PassResult(name=name)

        for token in tokens:
            hit = self._parse_token(token, formats)
            if hit is None:
                continue

            parsed, fmt = hit
            if fmt.order == "day_first":
                result.day_first = True

            result.dates.append(parsed)

        result.elapsed_ms = (time.perf_counter() - start) * 1000

        return result


    def _parse_token(self,
            token: str,
            formats: list[DateFormat] ) -> tuple[ParsedDate, DateFormat] | None:

        """First format in order that accepts the token wins."""

        digits = token_year_digits(token)

        for fmt in formats:
            if fmt.year_digits != digits:
                continue

            value = try_parse_token(token, fmt, pivot=self.short_year_pivot)
            if value is not None:
                return ParsedDate.from_date(value, token=token, format_name=fmt.name), fmt

        return None
