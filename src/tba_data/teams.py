"""
TBA Team data module.

This module handles team listings and single-team lookups.
It includes functionality for:
- Walking the paginated team listing for a season
- Resolving a team's display name
- Fetching a team's details
"""

import json
import logging
from typing import Any, Dict, Iterator, Optional, Union

from .api_client import RequestKind, TBAClient
from .constants import UNKNOWN_TEAM_NAME
from .exceptions import UpstreamError
from .models import TeamRecord
from .retry import RetryManager
from .validators import normalize_team_key, validate_year

logger = logging.getLogger(__name__)


def list_teams(client: TBAClient, year: Union[int, str],
               retry: Optional[RetryManager] = None,
               strict: bool = False) -> Iterator[TeamRecord]:
    """
    List every team registered for a season.

    The year is checked immediately; pages are fetched lazily as the
    returned iterator is consumed.

    Args:
        client: API client
        year: Four-digit season year
        retry: Retry policy for each page (default: from the client's configuration)
        strict: Raise UpstreamError when a page cannot be fetched, instead of
            ending the listing early

    Returns:
        Iterator of team records in provider order

    Raises:
        InvalidArgument: If the year is malformed or out of range
    """
    year = validate_year(year)
    if retry is None:
        retry = RetryManager(client.config.max_retries, client.config.retry_delay)
    return _iter_team_pages(client, year, retry, strict)


def _iter_team_pages(client: TBAClient, year: int, retry: RetryManager,
                     strict: bool) -> Iterator[TeamRecord]:
    page_num = 0
    total = 0

    while True:
        body = retry.execute(
            lambda: client.fetch(RequestKind.ALL_TEAMS_LIST, year=year, page_num=page_num)
        )
        if body is None:
            message = f"Giving up on team listing for {year} at page {page_num}; {total} teams listed"
            if strict:
                raise UpstreamError(message)
            logger.error(message)
            return

        try:
            teams = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Malformed team page {page_num} for {year}: {e}")
            return

        if not teams:
            logger.info(f"Listed {total} teams for {year} across {page_num} pages")
            return

        for team in teams:
            total += 1
            yield TeamRecord.from_api(team)

        page_num += 1


def _fetch_team(client: TBAClient, team_key: Optional[Union[int, str]]) -> Dict[str, Any]:
    team_key = normalize_team_key(team_key or client.config.require_team_key())
    try:
        team = client.fetch_json(RequestKind.TEAM_NAME, team_key=team_key)
    except UpstreamError as e:
        raise UpstreamError(f"Failed to look up team {team_key}: {e}", status_code=e.status_code) from e

    if not isinstance(team, dict):
        raise UpstreamError(f"Failed to look up team {team_key}: unexpected payload")
    return team


def get_team_name(client: TBAClient, team_key: Optional[Union[int, str]] = None) -> str:
    """
    Look up a team's nickname.

    Args:
        client: API client
        team_key: 'frcNNNN' or a bare team number (default: from configuration)

    Returns:
        The nickname with non-ASCII characters removed, or "Unknown"
    """
    team = _fetch_team(client, team_key)
    name = team.get('nickname') or UNKNOWN_TEAM_NAME
    return name.encode('ascii', 'ignore').decode('ascii')


def get_team_info(client: TBAClient, team_key: Optional[Union[int, str]] = None) -> TeamRecord:
    """Look up a team's details."""
    return TeamRecord.from_api(_fetch_team(client, team_key))
