"""Diagnostic record of one extraction call"""
from dataclasses import dataclass, field

from .parsed_date import ParsedDate


@dataclass
class PassResult:
    """Outcome of one parsing pass over the tokens"""

    name:       str
    dates:      list[ParsedDate] = field(default_factory=list)
    day_first:  bool             = False
    elapsed_ms: float            = 0


@dataclass
class ExtractionResult:
    """Tokens found, passes run, and the final ordered pair (if any)"""

    text:      str
    tokens:    list[str]         = field(default_factory=list)
    passes:    list[PassResult]  = field(default_factory=list)
    start:     ParsedDate | None = None
    end:       ParsedDate | None = None
    day_first: bool              = False
    failure:   str | None        = None

    @property
    def succeeded(self) -> bool:

        return self.start is not None and self.end is not None

    def pair(self) -> tuple[ParsedDate, ParsedDate] | None:

        if not self.succeeded:
            return None

        return self.start, self.end
