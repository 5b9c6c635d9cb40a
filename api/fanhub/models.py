"""Request-scoped domain objects shared by clients, services and routers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

GameState = Literal["scheduled", "live", "final"]
ChangeType = Literal["swap", "confirm", "update"]
Situation = Literal["even-strength", "power-play", "penalty-kill"]


@dataclass(frozen=True)
class TeamRef:
    """Team reference data as it appears on a game."""

    id: int | None
    name: str
    abbrev: str
    logo: str = ""
    score: int | None = None


@dataclass(frozen=True)
class Game:
    """A scheduled, live or completed game from the NHL schedule feeds."""

    id: int
    start_time: datetime
    venue: str
    home_team: TeamRef
    away_team: TeamRef
    state: GameState
    raw_state: str = ""
    game_type: int = 2

    def is_home(self, team_id: int) -> bool:
        return self.home_team.id == team_id

    def is_away(self, team_id: int) -> bool:
        return self.away_team.id == team_id

    def involves(self, team_id: int) -> bool:
        return self.is_home(team_id) or self.is_away(team_id)


@dataclass(frozen=True)
class NewsArticle:
    title: str
    link: str
    source: str
    published_at: str
    summary: str = ""


@dataclass
class Player:
    """A lineup slot occupant. ``confirmed`` is the only mutable field."""

    id: int
    name: str
    position: str
    number: int
    confirmed: bool = False


@dataclass(frozen=True)
class LineupChange:
    id: str
    timestamp: str
    type: ChangeType
    situation: Situation
    description: str
    details: dict = field(default_factory=dict)
