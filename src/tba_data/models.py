"""
Record types produced by the TBA data client.

Each record is an immutable value created fresh per call. ``to_dict`` gives
the display columns used for tabular output.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class EventRecord:
    """An event with its displayed week."""
    name: str
    key: str
    event_type: int
    event_type_string: str
    # 1-based week number, 0 for preseason, 8 for championship, or "Offseason"
    week: Union[int, str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'Name': self.name,
            'Key': self.key,
            'EventType': self.event_type,
            'EventTypeString': self.event_type_string,
            'Week': self.week,
        }


@dataclass(frozen=True)
class TeamRecord:
    """A team as listed by the API."""
    team_number: int
    name: str
    key: str
    city: Optional[str] = None
    state_prov: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'TeamRecord':
        """Build a record from a simple team object."""
        return cls(
            team_number=data.get('team_number'),
            name=data.get('nickname') or data.get('name'),
            key=data.get('key'),
            city=data.get('city'),
            state_prov=data.get('state_prov'),
            country=data.get('country'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'TeamNumber': self.team_number,
            'Name': self.name,
            'Key': self.key,
            'City': self.city,
            'StateProv': self.state_prov,
            'Country': self.country,
        }


@dataclass(frozen=True)
class PowerRating:
    """OPR-family ratings for one team at one event."""
    team_number: int
    metrics: Dict[str, Optional[float]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        row = {'TeamNumber': self.team_number}
        row.update(self.metrics)
        return row


@dataclass(frozen=True)
class RankingRecord:
    """An event ranking row with the team's display name."""
    rank: int
    team_number: str
    team_name: str
    wins: int
    losses: int
    ties: int
    matches_played: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'Rank': self.rank,
            'TeamNumber': self.team_number,
            'TeamName': self.team_name,
            'Wins': self.wins,
            'Losses': self.losses,
            'Ties': self.ties,
            'MatchesPlayed': self.matches_played,
        }


@dataclass(frozen=True)
class MatchSummary:
    """One of a team's matches at an event."""
    match_key: str
    description: str
    match_completed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'MatchKey': self.match_key,
            'Description': self.description,
            'MatchCompleted': self.match_completed,
        }
