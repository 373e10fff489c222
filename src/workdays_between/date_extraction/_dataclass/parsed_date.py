"""A calendar date parsed out of a query"""
from dataclasses import dataclass, field
from datetime import date

from ...utils.date.date_utils import modified_julian_day


@dataclass(frozen=True, order=True)
class ParsedDate:
    """One resolved date token, ordered by Modified Julian Day"""

    mjd:         int
    year:        int = field(compare=False)
    month:       int = field(compare=False)
    day:         int = field(compare=False)
    token:       str = field(default="", compare=False)
    format_name: str = field(default="", compare=False)

    @classmethod
    def from_date(cls,
            value: date,
            token: str       = "",
            format_name: str = "" ) -> "ParsedDate":

        return cls(
            mjd=modified_julian_day(value),
            year=value.year,
            month=value.month,
            day=value.day,
            token=token,
            format_name=format_name,
        )

    def as_date(self) -> date:

        return date(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """ISO weekday, Monday=1 … Sunday=7"""

        return self.as_date().isoweekday()

    def to_dict(self ) -> dict:

        return {
            'date':        self.as_date().isoformat(),
            'weekday':     self.weekday,
            'token':       self.token,
            'format_name': self.format_name,
        }
