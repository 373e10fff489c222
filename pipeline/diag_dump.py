"""
Diagnostic — dump tokens and parsing passes for tricky queries
TEST FILE
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from workdays_between.constants.triggers import strip_trigger
from workdays_between.date_extraction.date_extractor import DateExtractor
from workdays_between.pipeline_config import load_config

QUERIES = sys.argv[1:] or [
    "workdays between 01/31/2000 01/31/2001",
    "workdays between 13/01/2020 05/02/2020",
    "workdays between 02/01/2020 01/02/2020",
    "business days between Jan 5, 2021 and February 3 2021 inclusive",
    "working days 1.2.99 3.4.05",
    "workdays between 01/31/2020 13/01/2020",
    "workdays between 01/01/2020",
]

config    = load_config(ROOT / '.env')
extractor = DateExtractor(short_year_pivot=config.short_year_pivot)

for query in QUERIES:
    result = extractor.extract_detailed(strip_trigger(query))

    print(f"\n{'='*60}")
    print(f"QUERY: {query!r}")
    print(f"{'='*60}")
    print(f"TOKENS: {result.tokens}")

    for p in result.passes:
        dates = [f"{d.token!r}→{d.as_date().isoformat()} ({d.format_name})" for d in p.dates]
        print(f"  PASS {p.name:11s} day_first={p.day_first!s:5s} {p.elapsed_ms:.3f}ms  {dates}")

    if result.succeeded:
        print(f"\nRESULT: {result.start.as_date()} → {result.end.as_date()} (day_first={result.day_first})")
    else:
        print(f"\nRESULT: no answer ({result.failure})")
