"""Result of answering one workdays query"""
from dataclasses import dataclass

from ...date_extraction._dataclass.parsed_date import ParsedDate


@dataclass
class AnswerResult:
    """Ordered date pair, workday count, and the rendered sentence"""

    start:               ParsedDate
    end:                 ParsedDate
    workday_count:       int
    inclusive:           bool = False
    inclusive_requested: bool = False
    text:                str  = ""

    @property
    def total_days(self) -> int:

        return self.end.mjd - self.start.mjd

    def to_dict(self ) -> dict:

        return {
            'start':               self.start.as_date().isoformat(),
            'end':                 self.end.as_date().isoformat(),
            'workday_count':       self.workday_count,
            'inclusive':           self.inclusive,
            'inclusive_requested': self.inclusive_requested,
            'text':                self.text,
        }
