"""Helper functions for NHL API payloads.

Utility functions for parsing api-web.nhle.com responses into domain objects.
"""

from __future__ import annotations

from typing import Any

from ..models import Game, GameState, TeamRef
from ..utils.datetime_utils import EPOCH, parse_iso_datetime
from ..utils.parsing import as_dict, localized, parse_int

NHL_LOGO_URL = "https://assets.nhle.com/logos/nhl/svg/{abbrev}_light.svg"


def map_nhl_game_state(state: str | None) -> GameState:
    """Map NHL gameState to normalized status."""
    if state in ("OFF", "FINAL"):
        return "final"
    if state in ("LIVE", "CRIT"):
        return "live"
    return "scheduled"


def team_display_name(team_data: dict) -> str:
    """Full team name from whichever name fields the payload carries.

    Schedule payloads split the name into placeName/commonName, boxscore and
    landing payloads may carry a single localized ``name``.
    """
    name = localized(team_data.get("name"))
    if name:
        return name
    place = localized(team_data.get("placeName"))
    common = localized(team_data.get("commonName"))
    return f"{place} {common}".strip()


def build_team_ref(team_data: Any) -> TeamRef:
    """Build a TeamRef from an NHL API team object."""
    data = as_dict(team_data)
    abbrev = str(data.get("abbrev") or "")
    score = data.get("score")
    team_id = data.get("id")
    return TeamRef(
        id=parse_int(team_id) if team_id is not None else None,
        name=team_display_name(data) or abbrev,
        abbrev=abbrev,
        logo=str(data.get("logo") or (NHL_LOGO_URL.format(abbrev=abbrev) if abbrev else "")),
        score=parse_int(score) if score is not None else None,
    )


def parse_game(payload: Any) -> Game | None:
    """Parse one schedule/scoreboard game object; None when it has no id."""
    data = as_dict(payload)
    game_id = data.get("id")
    if game_id is None:
        return None
    start = (
        parse_iso_datetime(data.get("startTimeUTC"))
        or parse_iso_datetime(data.get("gameDate"))
        or EPOCH
    )
    raw_state = str(data.get("gameState") or "")
    return Game(
        id=parse_int(game_id),
        start_time=start,
        venue=localized(data.get("venue")),
        home_team=build_team_ref(data.get("homeTeam")),
        away_team=build_team_ref(data.get("awayTeam")),
        state=map_nhl_game_state(raw_state),
        raw_state=raw_state,
        game_type=parse_int(data.get("gameType"), default=2),
    )


def parse_games(items: Any) -> list[Game]:
    """Parse a list of game objects, skipping entries without an id."""
    if not isinstance(items, list):
        return []
    games = [parse_game(item) for item in items]
    return [game for game in games if game is not None]
