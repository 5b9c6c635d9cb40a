"""pytest configuration and fixtures."""

import os

# Set required environment variables for testing before any imports
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.pop("GNEWS_API_KEY", None)
os.environ.pop("X_BEARER_TOKEN", None)

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402

from fanhub.config import TeamConfig  # noqa: E402
from fanhub.models import Game, TeamRef  # noqa: E402

TOR = TeamRef(id=10, name="Toronto Maple Leafs", abbrev="TOR")
MTL = TeamRef(id=8, name="Montréal Canadiens", abbrev="MTL")
BOS = TeamRef(id=6, name="Boston Bruins", abbrev="BOS")


def make_game(
    game_id: int,
    start: datetime,
    *,
    home: TeamRef = TOR,
    away: TeamRef = MTL,
    state: str = "scheduled",
    venue: str = "Scotiabank Arena",
    game_type: int = 2,
) -> Game:
    raw = {"final": "OFF", "live": "LIVE"}.get(state, "FUT")
    return Game(
        id=game_id,
        start_time=start,
        venue=venue,
        home_team=home,
        away_team=away,
        state=state,
        raw_state=raw,
        game_type=game_type,
    )


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def skater(player_id: int, name: str, goals: int, assists: int) -> dict:
    return {
        "playerId": player_id,
        "name": {"default": name},
        "goals": goals,
        "assists": assists,
        "points": goals + assists,
        "plusMinus": 1,
        "sog": 3,
        "hits": 2,
        "toi": "18:30",
    }


def build_boxscore_payload(
    *,
    home_score: int = 4,
    away_score: int = 2,
    game_state: str = "OFF",
    period_number: int = 3,
    period_type: str = "REG",
    home_id: int = 10,
    away_id: int = 8,
) -> dict:
    """Flat api-web.nhle.com boxscore shape with Toronto at home by default."""
    teams = {
        10: {"abbrev": "TOR", "commonName": {"default": "Maple Leafs"},
             "placeName": {"default": "Toronto"}},
        8: {"abbrev": "MTL", "commonName": {"default": "Canadiens"},
            "placeName": {"default": "Montréal"}},
    }
    return {
        "id": 2024020100,
        "gameDate": "2024-10-26",
        "startTimeUTC": "2024-10-26T23:00:00Z",
        "venue": {"default": "Scotiabank Arena"},
        "gameState": game_state,
        "periodDescriptor": {"number": period_number, "periodType": period_type},
        "homeTeam": {"id": home_id, "score": home_score, **teams[home_id]},
        "awayTeam": {"id": away_id, "score": away_score, **teams[away_id]},
        "playerByGameStats": {
            "homeTeam": {
                "forwards": [
                    skater(1, "A. Matthews", 2, 1),
                    skater(2, "M. Marner", 0, 3),
                ],
                "defense": [skater(3, "M. Rielly", 0, 1)],
                "goalies": [
                    {"playerId": 4, "name": {"default": "J. Woll"},
                     "saveShotsAgainst": "28/30", "savePctg": 0.933, "toi": "60:00"},
                ],
            },
            "awayTeam": {
                "forwards": [skater(11, "N. Suzuki", 1, 0)],
                "defense": [skater(12, "L. Hutson", 0, 1)],
                "goalies": [
                    {"playerId": 13, "name": {"default": "S. Montembeault"},
                     "saveShotsAgainst": "31/35", "savePctg": 0.886, "toi": "58:10"},
                ],
            },
        },
        "summary": {
            "teamGameStats": [
                {"category": "sog", "homeValue": 35, "awayValue": 30},
                {"category": "powerPlay", "homeValue": "1/3", "awayValue": "0/2"},
                {"category": "faceoffWinningPctg", "homeValue": 0.55, "awayValue": 0.45},
                {"category": "hits", "homeValue": 20, "awayValue": 25},
            ]
        },
    }


@pytest.fixture
def team() -> TeamConfig:
    return TeamConfig()


@pytest.fixture
def boxscore_payload() -> dict:
    return build_boxscore_payload()
