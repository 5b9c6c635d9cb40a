"""Schedule and scoreboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from ..clients import NHLClient, UpstreamError
from ..config import Settings
from ..dependencies import get_app_settings, get_nhl_client
from ..logging_config import get_logger
from ..models import Game
from ..services.schedule import bucket_scores, filter_schedule, find_team_game
from ..utils.datetime_utils import format_utc, now_utc, today_utc
from .common import load_season_games, serialize_game, serialize_schedule_game, set_cache_headers
from .schemas import ScheduleResponse, ScoresResponse

router = APIRouter(tags=["schedule"])
logger = get_logger(__name__)


@router.get("/schedule", response_model=ScheduleResponse)
async def get_schedule(
    response: Response,
    filter: str | None = Query(None, description="home or away"),
    month: str | None = Query(None, pattern=r"^\d{4}-\d{2}$", description="YYYY-MM"),
    nhl: NHLClient = Depends(get_nhl_client),
    settings: Settings = Depends(get_app_settings),
) -> ScheduleResponse:
    team = settings.team
    all_games = await load_season_games(nhl, settings)
    games = filter_schedule(all_games, team.id, venue_filter=filter, month=month)

    set_cache_headers(response, settings.cache_config.schedule_seconds)
    return ScheduleResponse(
        games=[serialize_schedule_game(game, team) for game in games],
        total_games=len(all_games),
        home_games=sum(1 for game in all_games if game.is_home(team.id)),
        away_games=sum(1 for game in all_games if game.is_away(team.id)),
        last_updated=format_utc(now_utc()),
    )


async def _current_game(nhl: NHLClient, team_id: int) -> Game | None:
    try:
        games = await nhl.fetch_score_now()
    except UpstreamError as exc:
        logger.warning("scoreboard_unavailable", reason=exc.reason, error=str(exc))
        return None
    return find_team_game(games, team_id)


@router.get("/scores", response_model=ScoresResponse)
async def get_scores(
    response: Response,
    nhl: NHLClient = Depends(get_nhl_client),
    settings: Settings = Depends(get_app_settings),
) -> ScoresResponse:
    schedule = await load_season_games(nhl, settings)
    current = await _current_game(nhl, settings.team.id)
    buckets = bucket_scores(schedule, today_utc())

    set_cache_headers(response, settings.cache_config.scores_seconds)
    return ScoresResponse(
        current_game=serialize_game(current) if current else None,
        recent_games=[serialize_game(game) for game in buckets.recent],
        upcoming_games=[serialize_game(game) for game in buckets.upcoming],
        last_updated=format_utc(now_utc()),
    )
