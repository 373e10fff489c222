"""Trigger phrases that introduce a workdays query"""
import re


# Ordered longest-first so 'working days' never shadows a longer phrase
TRIGGER_PHRASES = [
    'business days between',
    'workdays between',
    'work days between',
    'working days',
]

_TRIGGER_PATTERN = re.compile(
    r'^\s*(?:' + '|'.join(re.escape(p) for p in TRIGGER_PHRASES) + r')\b',
    re.IGNORECASE,
)


def matches_trigger(query: str ) -> bool:

    """True when the query starts with one of the trigger phrases"""

    if not query:

        return False

    return bool(_TRIGGER_PATTERN.match(query))


def strip_trigger(query: str ) -> str:

    """
    Remove a leading trigger phrase and return the remainder

    Queries without a trigger come back stripped but otherwise unchanged.
    """

    if not query:

        return ""

    return _TRIGGER_PATTERN.sub('', query, count=1).strip()
