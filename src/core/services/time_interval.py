"""Expiry interval grammar.

The expiry is free text ("60 secs", "2 days", "10 hours") that must be:
1) understood by a natural-language date parser,
2) not written with a leading minus sign,
3) led by a non-zero integer,
4) explicit about its unit.

Checks run in that order and the first failure wins, so the operator gets
the most precise message for the first thing that is wrong.
"""

from __future__ import annotations

import re

from core.domain.errors import NegativeInterval, NoRecognizedUnit, NotATimeExpression, ZeroMagnitude
from core.domain.models import TimeInterval
from core.interfaces.expression import DateExpressionParser

TIME_UNITS: tuple[str, ...] = (
    "sec",
    "second",
    "min",
    "minute",
    "hour",
    "day",
    "week",
    "month",
    "year",
)

_CANONICAL_UNITS = {"sec": "second", "min": "minute"}

_UNIT_PATTERN = re.compile(r"\b(" + "|".join(TIME_UNITS) + r")s?\b")
_LEADING_INT = re.compile(r"^\s*\+?(\d+)")


def normalize_expression(raw: str) -> str:
    return raw.strip().lower()


def leading_magnitude(expression: str) -> int:
    """Leading integer run of `expression`; 0 when there is none."""

    match = _LEADING_INT.match(expression)
    if match is None:
        return 0
    return int(match.group(1))


def find_unit(expression: str) -> str | None:
    """First recognized unit token (canonical form), plural `s` allowed."""

    match = _UNIT_PATTERN.search(expression)
    if match is None:
        return None
    unit = match.group(1)
    return _CANONICAL_UNITS.get(unit, unit)


def parse_time_interval(raw: str, parser: DateExpressionParser) -> TimeInterval:
    """Validate `raw` as an expiry interval.

    Raises the `ExpiryError` subclass for the first failing check.
    """

    expression = normalize_expression(raw)

    if not expression or parser.parse(expression) is None:
        raise NotATimeExpression(expression)

    # Surface check on the text, not on the parsed sign.
    if expression.startswith("-"):
        raise NegativeInterval()

    magnitude = leading_magnitude(expression)
    if magnitude == 0:
        raise ZeroMagnitude()

    unit = find_unit(expression)
    if unit is None:
        raise NoRecognizedUnit(TIME_UNITS)

    return TimeInterval(magnitude=magnitude, unit=unit, expression=expression)
