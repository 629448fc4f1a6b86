"""
TBA Parameter Validation Module

This module validates and normalizes the years, team keys and event keys
passed to the client, so malformed values are rejected before any request.
"""

import re
from typing import Union

from .constants import (
    EVENT_KEY_PATTERN,
    MAX_YEAR,
    MIN_YEAR,
    TEAM_KEY_PATTERN,
    TEAM_KEY_PREFIX,
    YEAR_PATTERN,
)
from .exceptions import InvalidArgument

_YEAR_RE = re.compile(YEAR_PATTERN)
_TEAM_KEY_RE = re.compile(TEAM_KEY_PATTERN)
_EVENT_KEY_RE = re.compile(EVENT_KEY_PATTERN)


def validate_year(year: Union[int, str]) -> int:
    """
    Validate a season year.

    Args:
        year: Four-digit year as a string or integer

    Returns:
        The year as an integer

    Raises:
        InvalidArgument: If the year is not four digits or is outside the supported range
    """
    text = str(year).strip()
    if not _YEAR_RE.match(text):
        raise InvalidArgument(f"Invalid year: {year!r} (expected four digits)")

    value = int(text)
    if not MIN_YEAR <= value <= MAX_YEAR:
        raise InvalidArgument(f"Invalid year: {year!r} (must be between {MIN_YEAR} and {MAX_YEAR})")
    return value


def validate_team_key(team_key: Union[int, str]) -> str:
    """Validate a team key given as 'NNNN' or 'frcNNNN' and return it normalized."""
    text = str(team_key).strip()
    if not _TEAM_KEY_RE.match(text):
        raise InvalidArgument(f"Invalid team key: {team_key!r} (expected 1-5 digits, optionally prefixed with 'frc')")
    return normalize_team_key(text)


def validate_event_key(event_key: str) -> str:
    """Validate an event key such as '2024mnmi'."""
    text = str(event_key).strip()
    if not _EVENT_KEY_RE.match(text):
        raise InvalidArgument(f"Invalid event key: {event_key!r} (expected a year followed by the event code)")
    return text


def normalize_team_key(team_key: Union[int, str]) -> str:
    """Prefix a bare team number with 'frc'."""
    text = str(team_key).strip()
    if text.startswith(TEAM_KEY_PREFIX):
        return text
    return f"{TEAM_KEY_PREFIX}{text}"


def team_number_from_key(team_key: str) -> str:
    """Strip the 'frc' prefix from a team key."""
    if team_key.startswith(TEAM_KEY_PREFIX):
        return team_key[len(TEAM_KEY_PREFIX):]
    return team_key
