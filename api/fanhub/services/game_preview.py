"""Pre-game preview: live opponent lookup plus static preview sections."""

from __future__ import annotations

from typing import Any

from .. import fixtures
from ..clients.nhl_helpers import build_team_ref
from ..config import TeamConfig
from ..utils.parsing import as_dict, localized, parse_int

REGULAR_SEASON_GAME_TYPE = 2


def build_game_preview(landing: Any, team: TeamConfig, game_id: int | None = None) -> dict:
    """Shape a gamecenter landing payload into the preview response.

    Accepts the flat landing shape or one wrapped in a ``game`` key. Only the
    opponent and game facts are live; lineups, injuries, officials and odds
    come from sample content.
    """
    payload = as_dict(landing)
    game = as_dict(payload.get("game")) or payload
    home = build_team_ref(game.get("homeTeam"))
    away = build_team_ref(game.get("awayTeam"))
    opponent = away if home.id == team.id else home
    venue = localized(game.get("venue"))
    content = fixtures.preview_content()

    game_info: dict[str, Any] = {
        "id": game_id if game_id is not None else parse_int(game.get("id")),
        "date": str(game.get("gameDate") or ""),
        "venue": venue,
        "gameType": (
            "Regular Season"
            if parse_int(game.get("gameType"), default=REGULAR_SEASON_GAME_TYPE) == REGULAR_SEASON_GAME_TYPE
            else "Playoff"
        ),
        "opponent": {
            "id": opponent.id,
            "name": opponent.name,
            "abbrev": opponent.abbrev,
            "logo": opponent.logo,
            "record": content["opponentRecord"],
        },
        "weather": content["outdoorWeather"] if "Stadium" in venue else None,
    }
    return {
        "game": game_info,
        "probableLineups": content["probableLineups"],
        "injuries": content["injuries"],
        "officials": content["officials"],
        "odds": content["odds"],
    }
