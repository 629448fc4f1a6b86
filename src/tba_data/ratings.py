"""
OPR and component OPR extraction.

The API returns ratings as ``{metric: {team_key: value}}``; these functions
pivot them into one row per team, ordered by team number.
"""

import logging
from typing import Any, Dict, List, Optional

from .api_client import RequestKind, TBAClient
from .constants import OPR_METRICS
from .exceptions import UpstreamError
from .models import PowerRating
from .validators import team_number_from_key

logger = logging.getLogger(__name__)


def _metric_value(values: Any, team_key: str, metric: str) -> Optional[float]:
    if not isinstance(values, dict) or values.get(team_key) is None:
        logger.warning(f"No {metric} value for {team_key}")
        return None
    return values[team_key]


def _team_number(team_key: str) -> int:
    number = team_number_from_key(team_key)
    if not number.isdigit():
        raise UpstreamError(f"Unsupported team key in ratings: {team_key!r}")
    return int(number)


def get_oprs(client: TBAClient, event_key: Optional[str] = None) -> List[PowerRating]:
    """
    Get OPR, DPR and CCWM for every team at an event, rounded to two places.

    Args:
        client: API client
        event_key: Event key (default: from configuration)
    """
    payload = client.fetch_json(RequestKind.EVENT_OPR, event_key=event_key)
    if not isinstance(payload, dict):
        raise UpstreamError("Unexpected OPR payload")

    ratings = []
    for team_key in payload.get('oprs') or {}:
        metrics = {}
        for metric, field in OPR_METRICS.items():
            value = _metric_value(payload.get(field), team_key, metric)
            metrics[metric] = None if value is None else round(value, 2)
        ratings.append(PowerRating(_team_number(team_key), metrics))

    return sorted(ratings, key=lambda rating: rating.team_number)


def get_coprs(client: TBAClient, event_key: Optional[str] = None) -> List[PowerRating]:
    """
    Get component OPRs for every team at an event.

    Metric names vary by season; each top-level key of the response becomes
    a column. Values are returned unrounded.
    """
    payload: Dict[str, Dict[str, float]] = client.fetch_json(RequestKind.EVENT_COPR, event_key=event_key)
    if not isinstance(payload, dict):
        raise UpstreamError("Unexpected COPR payload")
    if not payload:
        return []

    metric_names = list(payload)
    team_keys = payload[metric_names[0]] or {}

    ratings = []
    for team_key in team_keys:
        metrics = {
            metric: _metric_value(payload[metric], team_key, metric)
            for metric in metric_names
        }
        ratings.append(PowerRating(_team_number(team_key), metrics))

    return sorted(ratings, key=lambda rating: rating.team_number)
