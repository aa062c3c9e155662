"""
Duration Parser.

Converts recipe time expressions into whole minutes. Understands ISO-8601
durations as used by schema.org ("PT1H30M") as well as the loose phrasing
found in recipe text ("50-55 minutes", "~20 min", "about 1 hour").
"""
from __future__ import annotations

import logging
import math
import re

from .ingredient_parser import parse_quantity

_LOGGER = logging.getLogger(__name__)

_ISO_DURATION_RE = re.compile(
    r'^P(?:(?P<days>\d+)D)?'
    r'(?:T(?:(?P<hours>\d+(?:\.\d+)?)H)?'
    r'(?:(?P<minutes>\d+(?:\.\d+)?)M)?'
    r'(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$',
    re.IGNORECASE,
)
_FILLER_RE = re.compile(
    r'\b(?:about|approximately|approx\.?|roughly)\b|[~≈]', re.IGNORECASE)
_HOUR_UNIT = r'(?:hours?|hrs?|h)(?![a-z])'
_MINUTE_UNIT = r'(?:minutes?|mins?|m)(?![a-z])'
_RANGE_RE = re.compile(
    rf'(\d+(?:\.\d+)?)\s*(?:[-–—]|to)\s*(\d+(?:\.\d+)?)\s*(?P<hours>{_HOUR_UNIT})?')
# Mixed numbers first so "2 1/2 hours" is not read as "1/2 hours"
_NUMBER = r'\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?'
_HOURS_RE = re.compile(rf'({_NUMBER})\s*{_HOUR_UNIT}')
_MINUTES_RE = re.compile(rf'({_NUMBER})\s*{_MINUTE_UNIT}')


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_iso_duration(text: str) -> int | None:
    match = _ISO_DURATION_RE.match(text)
    if not match or not any(match.groupdict().values()):
        return None

    days = float(match.group('days') or 0)
    hours = float(match.group('hours') or 0)
    minutes = float(match.group('minutes') or 0)
    seconds = float(match.group('seconds') or 0)

    total = days * 1440 + hours * 60 + minutes
    if not total and seconds:
        # Sub-minute durations still count as a minute
        return math.ceil(seconds / 60)
    return _round_half_up(total)


def parse_duration(value: str | None) -> int | None:
    """Parse a duration into whole minutes.

    Args:
        value: ISO-8601 duration or natural language time expression

    Returns:
        Total minutes, or None when no (non-zero) duration can be read

    Examples:
        >>> parse_duration("PT1H30M")
        90
        >>> parse_duration("50-55 minutes")
        53
        >>> parse_duration("~20 min")
        20
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    total = _parse_iso_duration(text)
    if total is None:
        total = _parse_natural_duration(text)

    if not total:
        _LOGGER.debug("No duration found in '%s'", value)
        return None
    return total


def _parse_natural_duration(text: str) -> int:
    clean = _FILLER_RE.sub(' ', text.lower()).strip()

    range_match = _RANGE_RE.search(clean)
    if range_match:
        low = float(range_match.group(1))
        high = float(range_match.group(2))
        mean = (low + high) / 2
        if range_match.group('hours'):
            mean *= 60
        return _round_half_up(mean)

    total = 0.0
    hours_match = _HOURS_RE.search(clean)
    minutes_match = _MINUTES_RE.search(clean)
    if hours_match:
        total += (parse_quantity(hours_match.group(1)) or 0) * 60
    if minutes_match:
        total += parse_quantity(minutes_match.group(1)) or 0
    return _round_half_up(total)
