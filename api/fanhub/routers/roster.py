"""Team roster endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from .. import fixtures
from ..clients import NHLClient
from ..config import Settings
from ..dependencies import get_app_settings, get_nhl_client
from ..services.fallback import fetch_with_fallback
from ..services.roster import group_roster
from ..utils.datetime_utils import format_utc, now_utc
from .common import serialize_roster_player, set_cache_headers
from .schemas import RosterResponse

router = APIRouter(tags=["roster"])


@router.get("/roster", response_model=RosterResponse)
async def get_roster(
    response: Response,
    nhl: NHLClient = Depends(get_nhl_client),
    settings: Settings = Depends(get_app_settings),
) -> RosterResponse:
    """Current roster grouped by position; sample players when the NHL API fails."""
    sourced = await fetch_with_fallback(
        lambda: nhl.fetch_roster(settings.team.abbreviation),
        fixtures.sample_roster,
        source="nhl_roster",
    )
    groups = group_roster(sourced.data)

    set_cache_headers(response, settings.cache_config.roster_seconds)
    return RosterResponse(
        forwards=[serialize_roster_player(p) for p in groups.forwards],
        defensemen=[serialize_roster_player(p) for p in groups.defensemen],
        goalies=[serialize_roster_player(p) for p in groups.goalies],
        total_players=groups.total_players,
        last_updated=format_utc(now_utc()),
        sample=sourced.sample,
    )
