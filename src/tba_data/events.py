"""
TBA Event listing module.

Lists the events of a season and works out the week each one is shown under.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .api_client import RequestKind, TBAClient
from .constants import (
    CHAMPIONSHIP_TYPES,
    CHAMPIONSHIP_WEEK,
    OFFSEASON,
    OFFSEASON_LABEL,
    PRESEASON,
    UNSCHEDULED_WEEK_SORT,
)
from .exceptions import UpstreamError
from .models import EventRecord
from .validators import validate_year

logger = logging.getLogger(__name__)


def display_week(event: Dict[str, Any], include_week0: bool = False,
                 include_offseason: bool = False) -> Optional[Union[int, str]]:
    """
    Work out the week an event is shown under.

    The API's week is 0-based; scheduled events are shown 1-based.

    Returns:
        The displayed week, or None if the event is excluded
    """
    week = event.get('week')
    event_type = event.get('event_type_string')

    if week is not None:
        return week + 1
    if event_type == PRESEASON and include_week0:
        return 0
    if event_type == OFFSEASON and include_offseason:
        return OFFSEASON_LABEL
    if event_type in CHAMPIONSHIP_TYPES:
        return CHAMPIONSHIP_WEEK
    return None


def list_events(client: TBAClient, year: Union[int, str], include_week0: bool = False,
                include_offseason: bool = False) -> List[EventRecord]:
    """
    List a season's events in week order.

    Args:
        client: API client
        year: Four-digit season year
        include_week0: Include preseason events as week 0
        include_offseason: Include offseason events

    Returns:
        Event records, ordered by raw week with unscheduled events last
    """
    year = validate_year(year)
    events = client.fetch_json(RequestKind.ALL_EVENTS_LIST, year=year)
    if not isinstance(events, list):
        raise UpstreamError(f"Expected a list of events for {year}")

    def sort_key(event):
        week = event.get('week')
        return UNSCHEDULED_WEEK_SORT if week is None else week

    records = []
    for event in sorted(events, key=sort_key):
        week = display_week(event, include_week0, include_offseason)
        if week is None:
            continue
        records.append(EventRecord(
            name=event.get('name'),
            key=event.get('key'),
            event_type=event.get('event_type'),
            event_type_string=event.get('event_type_string'),
            week=week,
        ))

    logger.info(f"Listed {len(records)} of {len(events)} events for {year}")
    return records
