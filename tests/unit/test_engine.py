import logging

import pytest

from workdays_between.engine import WorkdaysEngine
from workdays_between.pipeline_config import PipelineConfig


@pytest.mark.parametrize("query,expected", [
    (
        "workdays between 01/31/2000 01/31/2001",
        "There are 262 workdays between Jan 31, 2000 and Jan 31, 2001.",
    ),
    (
        "workdays between 01/31/2000 01/31/2001 inclusive",
        "There are 263 workdays between Jan 31, 2000 and Jan 31, 2001, inclusive.",
    ),
    (
        "business days between 01/31/2001 and 01/31/2000",
        "There are 262 workdays between Jan 31, 2000 and Jan 31, 2001.",
    ),
    (
        "workdays between Feb 1, 2020 and Feb 1, 2020",
        "There are 0 workdays between Feb 01, 2020 and Feb 01, 2020.",
    ),
    (
        "work days between 01/05/2024 01/08/2024",
        "There is 1 workday between Jan 05, 2024 and Jan 08, 2024.",
    ),
    (
        "working days 01/01/2024 01/06/2024 inclusive",
        "There are 4 workdays between Jan 01, 2024 and Jan 06, 2024.",
    ),
    (
        "01/01/2024 01/01/2024 INCLUSIVE",
        "There is 1 workday between Jan 01, 2024 and Jan 01, 2024, inclusive.",
    ),
    (
        "workdays between 1/1/2020-2/1/2020",
        "There are 22 workdays between Jan 01, 2020 and Feb 01, 2020.",
    ),
])
def test_answer_text(query, expected) -> None:
    assert WorkdaysEngine().answer_text(query) == expected


@pytest.mark.parametrize("query", [
    "workdays between 01/01/2020",
    "workdays between 01/01/2020 02/01/2020 03/01/2020",
    "workdays between 02/30/2020 03/01/2020",
    "workdays between tomorrow and next monday",
    "",
])
def test_no_answer(query) -> None:
    engine = WorkdaysEngine()

    assert engine.answer(query) is None
    assert engine.answer_text(query) is None


def test_inclusive_on_weekend_end_is_recorded_but_not_applied() -> None:
    result = WorkdaysEngine().answer("workdays between 01/01/2024 01/06/2024 inclusive")

    assert result.inclusive_requested is True
    assert result.inclusive is False
    assert result.workday_count == 4


@pytest.mark.parametrize("text,expected", [
    ("01/01/2024 01/02/2024 inclusive", True),
    ("Inclusive 01/01/2024 01/02/2024", True),
    ("01/01/2024 01/02/2024 noninclusive", False),
    ("01/01/2024 01/02/2024", False),
])
def test_is_inclusive(text, expected) -> None:
    assert WorkdaysEngine().is_inclusive(text) is expected


def test_config_drives_format_pivot_and_keyword() -> None:
    config = PipelineConfig(
        answer_date_format="%Y-%m-%d",
        short_year_pivot=50,
        inclusive_keyword="including",
    )
    engine = WorkdaysEngine(config)

    text = engine.answer_text("workdays between 1/1/49 1/7/49 including")

    assert text == "There are 5 workdays between 2049-01-01 and 2049-01-07, inclusive."


def test_answer_is_logged(caplog) -> None:
    logger = logging.getLogger("workdays.test.engine")
    caplog.set_level(logging.DEBUG, logger="workdays.test.engine")

    WorkdaysEngine().answer("workdays between 01/31/2000 01/31/2001", logger=logger)

    assert "[DateExtractor] Tokens: ['01/31/2000', '01/31/2001']" in caplog.text
    assert "[Workdays] There are 262 workdays" in caplog.text


@pytest.mark.parametrize("keyword", ["", "   "])
def test_empty_inclusive_keyword_rejected(keyword) -> None:
    with pytest.raises(ValueError):
        WorkdaysEngine(PipelineConfig(inclusive_keyword=keyword))
