"""
Constants for the TBA data client.
"""

from typing import Dict

BASE_URL = "https://www.thebluealliance.com/api/v3"

AUTH_HEADER = "X-TBA-Auth-Key"
CONDITIONAL_HEADER = "If-Modified-Since"
# Always older than the data, so the API never answers 304
EPOCH_HTTP_DATE = "Thu, 01 Jan 1970 00:00:00 GMT"

TEAM_KEY_PREFIX = "frc"

# First FRC season with data in the API, and the latest accepted season
MIN_YEAR = 1992
MAX_YEAR = 2026

YEAR_PATTERN = r"^\d{4}$"
TEAM_KEY_PATTERN = r"^(frc)?\d{1,5}$"
EVENT_KEY_PATTERN = r"^\d{4}[A-Za-z0-9]+$"

# Event type strings used when deciding the displayed week
PRESEASON = "Preseason"
OFFSEASON = "Offseason"
CHAMPIONSHIP_TYPES = ("Championship Division", "Championship Finals")

UNSCHEDULED_WEEK_SORT = 7
CHAMPIONSHIP_WEEK = 8
OFFSEASON_LABEL = "Offseason"

UNKNOWN_TEAM_NAME = "Unknown"

COMP_LEVEL_DESCRIPTIONS: Dict[str, str] = {
    "qm": "Qualifying Match {match_number}",
    "sf": "Semifinal Match {set_number}",
    "f": "Final {match_number}",
}

OPR_METRICS: Dict[str, str] = {
    "OPR": "oprs",
    "DPR": "dprs",
    "CCWM": "ccwms",
}

DEFAULT_CONFIG_FILE = "~/.tba_data/config.json"
CONFIG_RECORD_FIELDS = ("team_key", "event_key", "api_key")
