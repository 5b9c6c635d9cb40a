"""NHL web API client (schedule, scoreboard, boxscore, landing, roster).

Uses the public NHL API (api-web.nhle.com). Every method performs exactly one
request; failures surface as UpstreamError subclasses and are never retried.
"""

from __future__ import annotations

from typing import Any

import httpx

from ..logging_config import get_logger
from ..models import Game
from ..utils.parsing import as_list
from .errors import RateLimitedError, UpstreamError, UpstreamStatusError
from .nhl_helpers import parse_games

logger = get_logger(__name__)

NHL_CLUB_SCHEDULE_PATH = "/club-schedule-season/{team}/{season}"
NHL_SCORE_NOW_PATH = "/score/now"
NHL_BOXSCORE_PATH = "/gamecenter/{game_id}/boxscore"
NHL_LANDING_PATH = "/gamecenter/{game_id}/landing"
NHL_ROSTER_PATH = "/roster/{team}/current"

SOURCE = "nhl"


class NHLClient:
    """Async client for api-web.nhle.com built on a shared httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("nhl_fetch_error", url=url, error=str(exc))
            raise UpstreamError(SOURCE, str(exc)) from exc

        if response.status_code == 429:
            logger.warning("nhl_rate_limited", url=url)
            raise RateLimitedError(SOURCE, "rate limited", status_code=429)
        if response.status_code != 200:
            logger.warning(
                "nhl_fetch_failed",
                url=url,
                status=response.status_code,
                body=response.text[:200],
            )
            raise UpstreamStatusError(
                SOURCE, f"HTTP {response.status_code}", status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("nhl_invalid_json", url=url, error=str(exc))
            raise UpstreamError(SOURCE, "invalid JSON payload") from exc

    async def fetch_club_schedule(self, team: int | str, season: str) -> list[Game]:
        """Fetch a club's full season schedule."""
        payload = await self._get_json(NHL_CLUB_SCHEDULE_PATH.format(team=team, season=season))
        games = parse_games(payload.get("games") if isinstance(payload, dict) else None)
        logger.info("nhl_schedule_parsed", team=str(team), season=season, count=len(games))
        return games

    async def fetch_score_now(self) -> list[Game]:
        """Fetch today's league-wide scoreboard."""
        payload = await self._get_json(NHL_SCORE_NOW_PATH)
        return parse_games(payload.get("games") if isinstance(payload, dict) else None)

    async def fetch_boxscore(self, game_id: int | str) -> dict:
        payload = await self._get_json(NHL_BOXSCORE_PATH.format(game_id=game_id))
        if not isinstance(payload, dict):
            raise UpstreamError(SOURCE, "boxscore payload is not an object")
        return payload

    async def fetch_landing(self, game_id: int | str) -> dict:
        payload = await self._get_json(NHL_LANDING_PATH.format(game_id=game_id))
        if not isinstance(payload, dict):
            raise UpstreamError(SOURCE, "landing payload is not an object")
        return payload

    async def fetch_roster(self, team: str) -> list[dict]:
        """Fetch the current roster as one flat list of player objects."""
        payload = await self._get_json(NHL_ROSTER_PATH.format(team=team))
        if not isinstance(payload, dict):
            raise UpstreamError(SOURCE, "roster payload is not an object")
        players: list[dict] = []
        for group in ("forwards", "defensemen", "goalies"):
            players.extend(item for item in as_list(payload.get(group)) if isinstance(item, dict))
        return players
