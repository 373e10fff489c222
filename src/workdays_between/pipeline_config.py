"""Shared configuration for the workdays pipeline"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class PipelineConfig:
    """All tunable parameters for extraction, counting, and logging"""

    # Rendering
    answer_date_format: str = "%b %d, %Y"

    # Parsing
    short_year_pivot:  int = 69
    inclusive_keyword: str = "inclusive"

    # Logging
    log_level: str = "INFO"
    log_file:  str = ""


def load_config(
        env_path: str | Path | None = None ) -> PipelineConfig:

    """
    Build a PipelineConfig from the environment (.env loaded first).

    Variables:
        WORKDAYS_DATE_FORMAT, WORKDAYS_SHORT_YEAR_PIVOT,
        WORKDAYS_INCLUSIVE_KEYWORD, WORKDAYS_LOG_LEVEL, WORKDAYS_LOG_FILE

    Raises:
        ValueError: pivot is not an integer in 0–100, or the keyword is empty
    """

    if env_path is not None:
        load_dotenv(env_path)
    else:
        load_dotenv()

    defaults  = PipelineConfig()
    raw_pivot = os.getenv("WORKDAYS_SHORT_YEAR_PIVOT", str(defaults.short_year_pivot))

    try:
        pivot = int(raw_pivot)
    except ValueError:
        raise ValueError(f"WORKDAYS_SHORT_YEAR_PIVOT must be an integer, got {raw_pivot!r}") from None

    if not 0 <= pivot <= 100:
        raise ValueError(f"WORKDAYS_SHORT_YEAR_PIVOT must be within 0-100, got {pivot}")

    keyword = os.getenv("WORKDAYS_INCLUSIVE_KEYWORD", defaults.inclusive_keyword).strip()
    if not keyword:
        raise ValueError("WORKDAYS_INCLUSIVE_KEYWORD must not be empty")

    return PipelineConfig(
        answer_date_format=os.getenv("WORKDAYS_DATE_FORMAT", defaults.answer_date_format),
        short_year_pivot=pivot,
        inclusive_keyword=keyword,
        log_level=os.getenv("WORKDAYS_LOG_LEVEL", defaults.log_level).upper(),
        log_file=os.getenv("WORKDAYS_LOG_FILE", defaults.log_file),
    )
