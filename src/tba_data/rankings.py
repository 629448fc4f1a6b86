"""
Event ranking enrichment.
"""

import logging
from typing import List, Optional

from .api_client import RequestKind, TBAClient
from .exceptions import InvalidArgument, UpstreamError
from .models import RankingRecord
from .teams import get_team_name
from .validators import team_number_from_key

logger = logging.getLogger(__name__)


def get_rankings(client: TBAClient, event_key: Optional[str] = None) -> List[RankingRecord]:
    """
    Get an event's rankings with each team's name.

    Team names are looked up one request per row. If any lookup fails the
    error is logged and no rows are returned.

    Args:
        client: API client
        event_key: Event key (default: from configuration)

    Returns:
        Ranking records in the order the API lists them
    """
    payload = client.fetch_json(RequestKind.EVENT_RANKING, event_key=event_key)
    if not isinstance(payload, dict):
        raise UpstreamError("Unexpected rankings payload")

    records = []
    for entry in payload.get('rankings') or []:
        team_key = entry.get('team_key')
        try:
            if not team_key:
                raise UpstreamError(f"Ranking entry without team_key: {entry!r}")
            team_name = get_team_name(client, team_key)
        except (UpstreamError, InvalidArgument) as e:
            logger.error(f"Could not build rankings: {e}")
            return []

        record = entry.get('record') or {}
        records.append(RankingRecord(
            rank=entry.get('rank'),
            team_number=team_number_from_key(team_key),
            team_name=team_name,
            wins=record.get('wins'),
            losses=record.get('losses'),
            ties=record.get('ties'),
            matches_played=entry.get('matches_played'),
        ))

    return records
