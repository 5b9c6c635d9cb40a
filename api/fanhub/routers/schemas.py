"""Pydantic response and request schemas for the fan hub endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ────────────────────────────────────────────────────────────────────────────────
# Schedule & scores
# ────────────────────────────────────────────────────────────────────────────────


class TeamEntry(CamelModel):
    id: int | None
    name: str
    abbrev: str
    logo: str
    score: int | None = None


class BroadcastEntry(CamelModel):
    canada: list[str]
    usa: list[str]
    streaming: list[str]


class GameEntry(CamelModel):
    id: int
    game_date: str = Field(..., alias="gameDate")
    game_state: str = Field(..., alias="gameState")
    status: str
    game_type: int = Field(..., alias="gameType")
    venue: str
    home_team: TeamEntry = Field(..., alias="homeTeam")
    away_team: TeamEntry = Field(..., alias="awayTeam")


class ScheduleGameEntry(GameEntry):
    tv_broadcasts: BroadcastEntry = Field(..., alias="tvBroadcasts")
    ticket_link: str | None = Field(None, alias="ticketLink")


class ScheduleResponse(CamelModel):
    games: list[ScheduleGameEntry]
    total_games: int = Field(..., alias="totalGames")
    home_games: int = Field(..., alias="homeGames")
    away_games: int = Field(..., alias="awayGames")
    last_updated: str = Field(..., alias="lastUpdated")


class ScoresResponse(CamelModel):
    current_game: GameEntry | None = Field(None, alias="currentGame")
    recent_games: list[GameEntry] = Field(..., alias="recentGames")
    upcoming_games: list[GameEntry] = Field(..., alias="upcomingGames")
    last_updated: str = Field(..., alias="lastUpdated")


# ────────────────────────────────────────────────────────────────────────────────
# Roster
# ────────────────────────────────────────────────────────────────────────────────


class RosterPlayerEntry(CamelModel):
    id: int
    full_name: str = Field(..., alias="fullName")
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    sweater_number: int | None = Field(None, alias="sweaterNumber")
    position_code: str = Field(..., alias="positionCode")
    shoots_catches: str = Field(..., alias="shootsCatches")
    height_in_inches: int | None = Field(None, alias="heightInInches")
    height: str
    weight_in_pounds: int | None = Field(None, alias="weightInPounds")
    birth_date: str = Field(..., alias="birthDate")
    age: int | None = None
    birth_city: str = Field(..., alias="birthCity")
    birth_state_province: str = Field(..., alias="birthStateProvince")
    birth_country: str = Field(..., alias="birthCountry")
    headshot: str


class RosterResponse(CamelModel):
    forwards: list[RosterPlayerEntry]
    defensemen: list[RosterPlayerEntry]
    goalies: list[RosterPlayerEntry]
    total_players: int = Field(..., alias="totalPlayers")
    last_updated: str = Field(..., alias="lastUpdated")
    sample: bool = False


# ────────────────────────────────────────────────────────────────────────────────
# News
# ────────────────────────────────────────────────────────────────────────────────


class ArticleEntry(CamelModel):
    title: str
    link: str
    source: str
    published_at: str
    summary: str = ""


class NewsResponse(CamelModel):
    count: int
    articles: list[ArticleEntry]
    sources: int
    timestamp: str


# ────────────────────────────────────────────────────────────────────────────────
# Recap
# ────────────────────────────────────────────────────────────────────────────────


class RecapGameEntry(CamelModel):
    id: int
    date: str
    venue: str
    final_score: str = Field(..., alias="finalScore")
    winner: str
    loser: str
    is_team_win: bool = Field(..., alias="isTeamWin")


class PerformerEntry(CamelModel):
    name: str
    stats: str
    description: str


class TopPerformers(CamelModel):
    team: list[PerformerEntry]
    opponent: list[PerformerEntry]


class KeyStatsEntry(CamelModel):
    shots: str
    power_play: str = Field(..., alias="powerPlay")
    faceoffs: str
    hits: str


class SeoEntry(CamelModel):
    title: str
    description: str
    keywords: list[str]
    canonical_url: str
    image_url: str


class RecapBody(CamelModel):
    headline: str
    summary: str
    turning_point: str = Field(..., alias="turningPoint")
    top_performers: TopPerformers = Field(..., alias="topPerformers")
    key_stats: KeyStatsEntry = Field(..., alias="keyStats")
    content: str


class RecapResponse(CamelModel):
    game: RecapGameEntry
    recap: RecapBody
    seo: SeoEntry


# ────────────────────────────────────────────────────────────────────────────────
# Lineups
# ────────────────────────────────────────────────────────────────────────────────


class LineupChangeDetails(CamelModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    players_involved: list[str] | None = Field(None, alias="playersInvolved")
    previous_position: str | None = Field(None, alias="previousPosition")
    new_position: str | None = Field(None, alias="newPosition")
    description: str | None = None


class LineupChangeRequest(CamelModel):
    action: Literal["swap", "confirm", "update"]
    situation: Literal["even-strength", "power-play", "penalty-kill"]
    details: LineupChangeDetails = Field(default_factory=LineupChangeDetails)


class LineupChangeEntry(CamelModel):
    id: str
    timestamp: str
    type: str
    description: str
    situation: str
    details: dict[str, Any]


class LineupChangeResponse(CamelModel):
    success: bool
    change: LineupChangeEntry


class LineupResponse(CamelModel):
    depth_chart: dict[str, Any] = Field(..., alias="depthChart")
    change_log: list[LineupChangeEntry] = Field(..., alias="changeLog")
    last_updated: str = Field(..., alias="lastUpdated")
