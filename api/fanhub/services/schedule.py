"""Schedule filtering, mock broadcast data and score buckets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Sequence

from ..config import TeamConfig
from ..models import Game
from ..utils.datetime_utils import to_local

PRIME_TIME_HOUR = 19
PLAYOFF_GAME_TYPE = 3
RECENT_LIMIT = 5
UPCOMING_LIMIT = 5

VENUE_FILTERS = ("home", "away")


@dataclass(frozen=True)
class Broadcasts:
    canada: list[str] = field(default_factory=list)
    usa: list[str] = field(default_factory=list)
    streaming: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScoreBuckets:
    recent: list[Game]
    upcoming: list[Game]


def synthesize_broadcasts(game: Game, team: TeamConfig) -> Broadcasts:
    """Illustrative TV listings derived from when and where the game is played.

    Prime time and weekend are judged in the team's local timezone.
    """
    local_start = to_local(game.start_time, team.timezone)
    is_home = game.is_home(team.id)
    is_weekend = local_start.weekday() >= 5
    is_prime_time = local_start.hour >= PRIME_TIME_HOUR
    is_playoff = game.game_type == PLAYOFF_GAME_TYPE

    canada: list[str] = []
    usa: list[str] = []
    if is_home or is_prime_time:
        canada.append(team.regional_network)
    if is_weekend:
        canada.append("Hockey Night in Canada")
    if is_playoff:
        canada.extend(["CBC", "Sportsnet"])

    if is_prime_time:
        usa.append("ESPN+")
    if is_weekend and is_prime_time:
        usa.append("TNT")
    if is_playoff:
        usa.extend(["ESPN", "TNT"])

    streaming = ["NHL.TV", "ESPN+"]
    if canada:
        streaming.append(team.regional_streaming)
    return Broadcasts(canada=canada, usa=usa, streaming=streaming)


def ticket_link(game: Game, team: TeamConfig) -> str | None:
    if not game.is_home(team.id):
        return None
    return team.ticket_url_template.format(game_id=game.id)


def filter_schedule(
    games: Iterable[Game],
    team_id: int,
    venue_filter: str | None = None,
    month: str | None = None,
) -> list[Game]:
    """Apply the home/away and YYYY-MM filters, sorted by start time.

    Unknown venue filters are ignored. Months are compared on the UTC date.
    """
    result = list(games)
    if venue_filter == "home":
        result = [game for game in result if game.is_home(team_id)]
    elif venue_filter == "away":
        result = [game for game in result if game.is_away(team_id)]
    if month:
        result = [game for game in result if game.start_time.strftime("%Y-%m") == month]
    return sorted(result, key=lambda game: game.start_time)


def bucket_scores(schedule: Sequence[Game], today: date) -> ScoreBuckets:
    """Last few finished games before ``today`` and the next few unfinished ones."""
    ordered = sorted(schedule, key=lambda game: game.start_time)
    recent = [g for g in ordered if g.start_time.date() < today and g.state == "final"]
    upcoming = [g for g in ordered if g.start_time.date() >= today and g.state != "final"]
    return ScoreBuckets(recent=recent[-RECENT_LIMIT:], upcoming=upcoming[:UPCOMING_LIMIT])


def find_team_game(games: Iterable[Game], team_id: int) -> Game | None:
    return next((game for game in games if game.involves(team_id)), None)
