import logging
from datetime import date

import pytest

from workdays_between.date_extraction import (
    DateExtractor,
    IncompleteParseError,
    NoDatesFoundError,
)


def _dates(pair) -> tuple[date, date]:
    start, end = pair
    return start.as_date(), end.as_date()


def test_month_first_pair() -> None:
    result = DateExtractor().extract_detailed("01/31/2000 01/31/2001")

    assert result.succeeded
    assert result.tokens == ["01/31/2000", "01/31/2001"]
    assert _dates(result.pair()) == (date(2000, 1, 31), date(2001, 1, 31))
    assert result.day_first is False
    assert [p.name for p in result.passes] == ["default"]
    assert result.start.format_name == "M/D/YYYY"


def test_order_invariance() -> None:
    extractor = DateExtractor()

    forward  = extractor.extract("between 01/31/2000 and 01/31/2001")
    backward = extractor.extract("between 01/31/2001 and 01/31/2000")

    assert _dates(forward) == _dates(backward) == (date(2000, 1, 31), date(2001, 1, 31))


@pytest.mark.parametrize("text", [
    "13/01/2020 05/02/2020",
    "05/02/2020 13/01/2020",
])
def test_day_first_token_forces_day_first_pair(text) -> None:
    result = DateExtractor().extract_detailed(text)

    assert result.day_first is True
    assert [p.name for p in result.passes] == ["default", "day_first"]
    assert _dates(result.pair()) == (date(2020, 1, 13), date(2020, 2, 5))


def test_ambiguous_pair_shares_month_first() -> None:
    pair = DateExtractor().extract("workdays between 02/01/2020 01/02/2020")

    assert _dates(pair) == (date(2020, 1, 2), date(2020, 2, 1))
    assert {d.format_name for d in pair} == {"M/D/YYYY"}


def test_conflicting_conventions_yield_nothing() -> None:
    result = DateExtractor().extract_detailed("01/31/2020 13/01/2020")

    assert result.pair() is None
    assert result.failure == "incomplete_parse"


@pytest.mark.parametrize("text", [
    "workdays between 01/01/2020",
    "workdays between 01/01/2020 02/01/2020 03/01/2020",
    "workdays between now and then",
    "",
])
def test_wrong_token_count_yields_nothing(text) -> None:
    result = DateExtractor().extract_detailed(text)

    assert result.pair() is None
    assert result.failure == "no_dates_found"


def test_textual_dates() -> None:
    pair = DateExtractor().extract("January 5 2021 and dec 25, 2020")

    assert _dates(pair) == (date(2020, 12, 25), date(2021, 1, 5))
    assert pair[0].format_name == "Mon D, YYYY"
    assert pair[1].format_name == "Month D YYYY"


def test_equal_dates_are_a_valid_pair() -> None:
    start, end = DateExtractor().extract("Feb 1, 2020 and Feb 1, 2020")

    assert start == end
    assert start.as_date() == date(2020, 2, 1)


def test_mixed_separators() -> None:
    pair = DateExtractor().extract("12-25-2020 to 1.15.2021")

    assert _dates(pair) == (date(2020, 12, 25), date(2021, 1, 15))


def test_textual_and_numeric_together() -> None:
    pair = DateExtractor().extract("13/01/2020 and Mar 3, 2020")

    assert _dates(pair) == (date(2020, 1, 13), date(2020, 3, 3))


@pytest.mark.parametrize("text,expected", [
    ("1/2/99 and 3/4/05", (date(1999, 1, 2), date(2005, 3, 4))),
    ("1/1/68 and 1/1/69", (date(1969, 1, 1), date(2068, 1, 1))),
    ("Jun 3, 21 and Jul 4, 21", (date(2021, 6, 3), date(2021, 7, 4))),
])
def test_short_years(text, expected) -> None:
    assert _dates(DateExtractor().extract(text)) == expected


def test_custom_short_year_pivot() -> None:
    pair = DateExtractor(short_year_pivot=50).extract("1/1/49 and 1/1/50")

    assert _dates(pair) == (date(1950, 1, 1), date(2049, 1, 1))


@pytest.mark.parametrize("text", [
    "02/30/2020 03/01/2020",      # no Feb 30 either way
    "1/2/200 1/3/2000",           # 3-digit year
    "00/10/2020 01/10/2020",
])
def test_invalid_token_fails_closed(text) -> None:
    result = DateExtractor().extract_detailed(text)

    assert result.pair() is None
    assert result.failure == "incomplete_parse"


def test_iso_dates_are_not_tokens() -> None:
    result = DateExtractor().extract_detailed("2020-01-02 2020-02-03")

    assert result.tokens == []
    assert result.failure == "no_dates_found"


def test_parse_raises_typed_errors() -> None:
    extractor = DateExtractor()

    with pytest.raises(NoDatesFoundError):
        extractor.parse("no dates here")

    with pytest.raises(IncompleteParseError):
        extractor.parse("02/30/2020 03/01/2020")


def test_parse_returns_ordered_pair() -> None:
    start, end = DateExtractor().parse("3/1/2020 2/1/2020")

    assert start < end
    assert (start.as_date(), end.as_date()) == (date(2020, 2, 1), date(2020, 3, 1))


def test_failure_is_logged(caplog) -> None:
    logger = logging.getLogger("workdays.test.extractor")
    caplog.set_level(logging.DEBUG, logger="workdays.test.extractor")

    DateExtractor().extract("only 01/01/2020 here", logger=logger)

    assert "[DateExtractor] No answer (no_dates_found)" in caplog.text
