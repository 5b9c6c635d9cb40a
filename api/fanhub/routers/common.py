"""Shared helpers for fan hub routers."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import Response

from ..clients import NHLClient, UpstreamError
from ..config import Settings, TeamConfig
from ..logging_config import get_logger
from ..models import Game, NewsArticle, TeamRef
from ..services.recap_generator import GameRecap, Performer
from ..services.roster import RosterPlayer
from ..services.schedule import synthesize_broadcasts, ticket_link
from ..utils.datetime_utils import format_utc, season_id
from .schemas import (
    ArticleEntry,
    BroadcastEntry,
    GameEntry,
    KeyStatsEntry,
    PerformerEntry,
    RecapBody,
    RecapGameEntry,
    RecapResponse,
    RosterPlayerEntry,
    ScheduleGameEntry,
    SeoEntry,
    TeamEntry,
    TopPerformers,
)

logger = get_logger(__name__)


async def load_season_games(nhl: NHLClient, settings: Settings) -> list[Game]:
    """Current season schedule; an unavailable upstream yields no games."""
    try:
        return await nhl.fetch_club_schedule(settings.team.abbreviation, season_id())
    except UpstreamError as exc:
        logger.warning("schedule_unavailable", reason=exc.reason, error=str(exc))
        return []


def set_cache_headers(response: Response, max_age: int) -> None:
    response.headers["Cache-Control"] = f"public, max-age={max_age}"


def serialize_team(team: TeamRef) -> TeamEntry:
    return TeamEntry(id=team.id, name=team.name, abbrev=team.abbrev, logo=team.logo, score=team.score)


def _game_fields(game: Game) -> dict:
    return {
        "id": game.id,
        "game_date": format_utc(game.start_time),
        "game_state": game.raw_state,
        "status": game.state,
        "game_type": game.game_type,
        "venue": game.venue,
        "home_team": serialize_team(game.home_team),
        "away_team": serialize_team(game.away_team),
    }


def serialize_game(game: Game) -> GameEntry:
    return GameEntry(**_game_fields(game))


def serialize_schedule_game(game: Game, team: TeamConfig) -> ScheduleGameEntry:
    broadcasts = synthesize_broadcasts(game, team)
    return ScheduleGameEntry(
        **_game_fields(game),
        tv_broadcasts=BroadcastEntry(**asdict(broadcasts)),
        ticket_link=ticket_link(game, team),
    )


def serialize_roster_player(player: RosterPlayer) -> RosterPlayerEntry:
    return RosterPlayerEntry(full_name=player.full_name, **asdict(player))


def serialize_article(article: NewsArticle) -> ArticleEntry:
    return ArticleEntry(**asdict(article))


def _performers(items: list[Performer]) -> list[PerformerEntry]:
    return [PerformerEntry(**asdict(item)) for item in items]


def serialize_recap(recap: GameRecap) -> RecapResponse:
    return RecapResponse(
        game=RecapGameEntry(**asdict(recap.game)),
        recap=RecapBody(
            headline=recap.headline,
            summary=recap.summary,
            turning_point=recap.turning_point,
            top_performers=TopPerformers(
                team=_performers(recap.team_performers),
                opponent=_performers(recap.opponent_performers),
            ),
            key_stats=KeyStatsEntry(**asdict(recap.key_stats)),
            content=recap.content,
        ),
        seo=SeoEntry(**asdict(recap.seo)),
    )
