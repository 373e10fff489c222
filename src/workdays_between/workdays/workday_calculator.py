"""
Closed-form workday counting between two ordered dates.

No per-day loop: full weeks contribute five workdays each, and a fixed
set of corrections handles the partial week left over.
"""
from ..date_extraction._dataclass.parsed_date import ParsedDate
from ..utils.date.date_utils import format_answer_date
from ._dataclass.answer_result import AnswerResult


SATURDAY = 6
SUNDAY   = 7


def pluralize_workdays(
        count: int ) -> tuple[str, str]:

    """Return (verb, noun) for the count — singular only for exactly 1."""

    if count == 1:
        return "is", "workday"

    return "are", "workdays"


class WorkdaySpanCalculator:

    """
    Count Monday–Friday days spanned by an ordered date pair.

    Args:
        date_format: strftime format used when rendering the sentence
    """

    def __init__(self,
            date_format: str = "%b %d, %Y" ) -> None:

        self.date_format = date_format


    def compute(self,
            start: ParsedDate,
            end: ParsedDate,
            inclusive: bool = False ) -> int:

        """Workday count only (>= 0)."""

        count, _ = self._count(start, end, inclusive)

        return count


    def span(self,
            start: ParsedDate,
            end: ParsedDate,
            inclusive: bool = False,
            logger=None ) -> AnswerResult:

        """
        Count workdays and render the answer sentence.

        Args:
            start:     Earlier date
            end:       Later (or equal) date
            inclusive: Caller asked to count the end date
            logger:    Optional logger with .debug()

        Returns:
            AnswerResult with count, applied inclusive flag, and text

        Raises:
            ValueError: start is after end
        """

        if start > end:
            raise ValueError(
                f'start {start.as_date()} is after end {end.as_date()}'
            )

        count, applied = self._count(start, end, inclusive)

        result = AnswerResult(
            start=start,
            end=end,
            workday_count=count,
            inclusive=applied,
            inclusive_requested=inclusive,
        )
        result.text = self.render(result)

        if logger:
            logger.debug(
                f'[Workdays] {result.total_days} days → {count} workdays '
                f'(inclusive requested={inclusive}, applied={applied})'
            )

        return result


    def render(self,
            result: AnswerResult ) -> str:

        """There {is|are} N workday(s) between <start> and <end>[, inclusive]."""

        verb, noun = pluralize_workdays(result.workday_count)
        start_str  = format_answer_date(result.start.as_date(), self.date_format)
        end_str    = format_answer_date(result.end.as_date(), self.date_format)
        suffix     = ", inclusive" if result.inclusive else ""

        return (
            f"There {verb} {result.workday_count} {noun} "
            f"between {start_str} and {end_str}{suffix}."
        )


    # ── Arithmetic ────────────────────────────────────────────────

    @staticmethod
    def _count(
            start: ParsedDate,
            end: ParsedDate,
            inclusive: bool ) -> tuple[int, bool]:

        """Return (workdays, inclusive_applied)."""

        total_days = end.mjd - start.mjd
        full_weeks = total_days // 7

        # Every full week holds exactly one Saturday and one Sunday
        workdays  = total_days - 2 * full_weeks
        remainder = total_days % 7

        weekday_start = start.weekday
        reach         = weekday_start + remainder

        # Only counted when the span does not end on a Saturday-equivalent
        applied = False
        if inclusive and reach % 7 < SATURDAY:
            workdays += 1
            applied   = True

        if remainder > 0:
            # Lands on a weekend
            if reach % 7 == 0:
                workdays -= 2

            if reach % 7 == SATURDAY:
                workdays -= 1

            # Starts on a weekend
            if weekday_start == SATURDAY:
                workdays -= 2

            if weekday_start == SUNDAY:
                workdays -= 1

            # Weekend in the middle
            if weekday_start < SATURDAY and reach > 7:
                workdays -= 2

            if workdays < 0:
                workdays = 0

        return workdays, applied
