"""
Match summaries for a team at an event.
"""

from typing import Any, Dict, List, Optional, Union

from .api_client import RequestKind, TBAClient
from .constants import COMP_LEVEL_DESCRIPTIONS
from .exceptions import UpstreamError
from .models import MatchSummary


def describe_match(match: Dict[str, Any]) -> str:
    """Human-readable name for a match, empty for levels without one."""
    template = COMP_LEVEL_DESCRIPTIONS.get(match.get('comp_level'))
    if template is None:
        return ""
    return template.format(match_number=match.get('match_number'),
                           set_number=match.get('set_number'))


def get_match_summaries(client: TBAClient, team_key: Optional[Union[int, str]] = None,
                        event_key: Optional[str] = None) -> List[MatchSummary]:
    """
    Summarize a team's matches at an event in predicted start order.

    Args:
        client: API client
        team_key: 'frcNNNN' or a bare team number (default: from configuration)
        event_key: Event key (default: from configuration)
    """
    matches = client.fetch_json(RequestKind.TEAM_MATCH, team_key=team_key, event_key=event_key)
    if not isinstance(matches, list):
        raise UpstreamError("Unexpected match list payload")

    # Matches without a predicted time go last
    matches = sorted(matches, key=lambda m: (m.get('predicted_time') is None,
                                             m.get('predicted_time') or 0))

    summaries = []
    for match in matches:
        winner = match.get('winning_alliance')
        summaries.append(MatchSummary(
            match_key=match.get('key'),
            description=describe_match(match),
            match_completed=isinstance(winner, str) and winner != "",
        ))
    return summaries
