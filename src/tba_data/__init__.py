"""
tba_data: a client for The Blue Alliance API v3 that flattens its responses
into simple records.
"""

from .api_client import RequestKind, TBAClient, build_headers, get_status
from .config import TBAConfig, create_config, get_config
from .events import list_events
from .exceptions import (
    ConfigurationError,
    InvalidArgument,
    InvalidRequestKind,
    TBADataError,
    UpstreamError,
)
from .matches import get_match_summaries
from .rankings import get_rankings
from .ratings import get_coprs, get_oprs
from .retry import RetryManager
from .teams import get_team_info, get_team_name, list_teams

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidArgument",
    "InvalidRequestKind",
    "RequestKind",
    "RetryManager",
    "TBAClient",
    "TBAConfig",
    "TBADataError",
    "UpstreamError",
    "build_headers",
    "create_config",
    "get_config",
    "get_coprs",
    "get_match_summaries",
    "get_oprs",
    "get_rankings",
    "get_status",
    "get_team_info",
    "get_team_name",
    "list_events",
    "list_teams",
]
