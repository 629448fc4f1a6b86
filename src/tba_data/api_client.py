"""
TBA API Client

This module issues authenticated requests against The Blue Alliance API v3.
It includes functionality for:
- Building the authentication headers
- Mapping a request kind and its parameters to an endpoint URL
- Validating the HTTP response and returning the raw body
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

import requests

from .config import TBAConfig
from .constants import AUTH_HEADER, CONDITIONAL_HEADER, EPOCH_HTTP_DATE
from .exceptions import ConfigurationError, InvalidRequestKind, UpstreamError
from .validators import validate_event_key, validate_team_key

logger = logging.getLogger(__name__)


class RequestKind(Enum):
    """The endpoints the client knows how to call."""
    ALL_EVENTS_LIST = "AllEventsList"
    ALL_TEAMS_LIST = "AllTeamsList"
    TEAM_NAME = "TeamName"
    EVENT_OPR = "EventOPR"
    EVENT_COPR = "EventCOPR"
    TEAM_MATCH = "TeamMatch"
    EVENT_RANKING = "EventRanking"
    STATUS = "Status"

    @classmethod
    def parse(cls, kind: Union['RequestKind', str]) -> 'RequestKind':
        """Accept a member, its value ('EventOPR') or its name ('EVENT_OPR')."""
        if isinstance(kind, cls):
            return kind
        for member in cls:
            if kind in (member.value, member.name):
                return member
        raise InvalidRequestKind(f"Unknown request kind: {kind!r}")


URL_TEMPLATES: Dict[RequestKind, str] = {
    RequestKind.ALL_EVENTS_LIST: "/events/{year}",
    RequestKind.ALL_TEAMS_LIST: "/teams/{year}/{page_num}/simple",
    RequestKind.TEAM_NAME: "/team/{team_key}/simple",
    RequestKind.EVENT_OPR: "/event/{event_key}/oprs",
    RequestKind.EVENT_COPR: "/event/{event_key}/coprs",
    RequestKind.TEAM_MATCH: "/team/{team_key}/event/{event_key}/matches/simple",
    RequestKind.EVENT_RANKING: "/event/{event_key}/rankings",
    RequestKind.STATUS: "/status",
}

_missing_templates = set(RequestKind) - set(URL_TEMPLATES)
if _missing_templates:
    raise RuntimeError(f"No URL template for: {sorted(k.value for k in _missing_templates)}")


def build_headers(api_key: Optional[str]) -> Dict[str, str]:
    """
    Build the headers sent with every request.

    Raises:
        ConfigurationError: If no API key is available
    """
    if not api_key or not api_key.strip():
        raise ConfigurationError("No TBA API key configured")
    return {
        AUTH_HEADER: api_key.strip(),
        CONDITIONAL_HEADER: EPOCH_HTTP_DATE,
    }


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully resolved request."""
    kind: RequestKind
    year: int
    event_key: Optional[str] = None
    team_key: Optional[str] = None
    page_num: int = 0

    def path(self) -> str:
        return URL_TEMPLATES[self.kind].format(
            year=self.year,
            event_key=self.event_key,
            team_key=self.team_key,
            page_num=self.page_num,
        )


class TBAClient:
    """Fetches raw responses from the TBA API."""

    def __init__(self, config: Optional[TBAConfig] = None,
                 session: Optional[requests.Session] = None):
        """
        Args:
            config: Client configuration; read from the environment when omitted
            session: HTTP session to issue requests with
        """
        self.config = config or TBAConfig.from_env()
        self.session = session or requests.Session()

    def describe(self, kind: Union[RequestKind, str], year: Optional[int] = None,
                 event_key: Optional[str] = None, team_key: Optional[str] = None,
                 page_num: int = 0) -> RequestDescriptor:
        """
        Resolve a request, filling team and event keys from configuration when needed.

        Raises:
            InvalidRequestKind: If kind is unknown
            InvalidArgument: If a team or event key is malformed
            ConfigurationError: If a needed key is neither given nor configured
        """
        kind = RequestKind.parse(kind)
        template = URL_TEMPLATES[kind]

        if "{event_key}" in template:
            event_key = validate_event_key(event_key or self.config.require_event_key())
        if "{team_key}" in template:
            team_key = validate_team_key(team_key or self.config.require_team_key())

        return RequestDescriptor(
            kind=kind,
            year=year if year is not None else datetime.now().year,
            event_key=event_key,
            team_key=team_key,
            page_num=page_num,
        )

    def fetch(self, kind: Union[RequestKind, str], year: Optional[int] = None,
              event_key: Optional[str] = None, team_key: Optional[str] = None,
              page_num: int = 0) -> str:
        """
        Issue a single GET for the request and return the response body.

        Args:
            kind: Which endpoint to call
            year: Season year (default: current year)
            event_key: Event key (default: from configuration)
            team_key: Team key or bare number (default: from configuration)
            page_num: Page for paginated listings

        Returns:
            Raw response text

        Raises:
            InvalidRequestKind: If kind is unknown
            InvalidArgument: If a team or event key is malformed
            ConfigurationError: If the API key or a needed default key is missing
            UpstreamError: On a non-200 status, an empty body or a network failure
        """
        descriptor = self.describe(kind, year, event_key, team_key, page_num)
        headers = build_headers(self.config.api_key)
        url = f"{self.config.base_url.rstrip('/')}{descriptor.path()}"

        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, headers=headers, allow_redirects=True,
                                        timeout=self.config.timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise UpstreamError(f"Request to {url} returned HTTP {response.status_code}",
                                status_code=response.status_code)
        if not response.text:
            raise UpstreamError(f"Request to {url} returned an empty body",
                                status_code=response.status_code)
        return response.text

    def fetch_json(self, kind: Union[RequestKind, str], **params) -> Any:
        """Fetch a request and parse the body as JSON."""
        body = self.fetch(kind, **params)
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise UpstreamError(f"Malformed JSON in {RequestKind.parse(kind).value} response: {e}") from e


def get_status(client: TBAClient) -> Dict[str, Any]:
    """Return the API status object (current_season, max_season, is_datafeed_down, ...)."""
    status = client.fetch_json(RequestKind.STATUS)
    if not isinstance(status, dict):
        raise UpstreamError("Unexpected status payload")
    return status
