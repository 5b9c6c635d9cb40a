"""Game-level endpoints: recap, recap share card and pre-game preview."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..clients import NHLClient, UpstreamError
from ..config import Settings
from ..dependencies import get_app_settings, get_nhl_client
from ..logging_config import get_logger
from ..services.game_preview import build_game_preview
from ..services.recap_generator import GameRecap, generate_recap, parse_boxscore
from ..services.recap_image import (
    render_placeholder_card,
    render_placeholder_png,
    render_recap_card,
    render_recap_png,
)
from .common import serialize_recap, set_cache_headers
from .schemas import RecapResponse

router = APIRouter(tags=["games"])
logger = get_logger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"
PNG_MEDIA_TYPE = "image/png"


class RecapUnavailable(Exception):
    """Boxscore could not be fetched."""


class GameNotFinal(Exception):
    """Boxscore exists but the game is not over."""


async def build_recap(game_id: int, nhl: NHLClient, settings: Settings) -> GameRecap:
    try:
        payload = await nhl.fetch_boxscore(game_id)
    except UpstreamError as exc:
        logger.warning("boxscore_unavailable", game_id=game_id, reason=exc.reason, error=str(exc))
        raise RecapUnavailable(str(exc)) from exc

    box = parse_boxscore(payload)
    if not box.is_final:
        raise GameNotFinal(box.game_state)

    return generate_recap(
        box,
        settings.team,
        site_name=settings.site_name,
        site_url=settings.site_url,
        dominant_margin=settings.recap_config.dominant_margin,
        overtime_after_period=settings.recap_config.overtime_after_period,
    )


@router.get("/recap/{game_id}", response_model=RecapResponse)
async def get_recap(
    game_id: int,
    response: Response,
    nhl: NHLClient = Depends(get_nhl_client),
    settings: Settings = Depends(get_app_settings),
) -> RecapResponse:
    try:
        recap = await build_recap(game_id, nhl, settings)
    except RecapUnavailable as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Game not found or not completed"
        ) from exc
    except GameNotFinal as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Game not yet completed"
        ) from exc

    set_cache_headers(response, settings.cache_config.recap_seconds)
    return serialize_recap(recap)


@router.get("/image-recap/{game_id}")
async def get_recap_image(
    game_id: int,
    image_format: str = Query("png", alias="format", pattern="^(png|svg)$"),
    nhl: NHLClient = Depends(get_nhl_client),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Share card (PNG by default, SVG on request).

    A placeholder card is returned whenever the recap cannot be built.
    """
    as_png = image_format == "png"
    placeholder = render_placeholder_png if as_png else render_placeholder_card
    try:
        recap = await build_recap(game_id, nhl, settings)
    except (RecapUnavailable, GameNotFinal):
        content = placeholder("Game Recap", "Not Available")
    except Exception as exc:
        logger.exception("recap_image_failed", game_id=game_id, error=str(exc))
        content = placeholder("Error Loading Recap")
    else:
        render = render_recap_png if as_png else render_recap_card
        content = render(recap, settings.site_name)

    response = Response(content=content, media_type=PNG_MEDIA_TYPE if as_png else SVG_MEDIA_TYPE)
    set_cache_headers(response, settings.cache_config.recap_seconds)
    return response


@router.get("/game-preview/{game_id}")
async def get_game_preview(
    game_id: int,
    response: Response,
    nhl: NHLClient = Depends(get_nhl_client),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    try:
        landing = await nhl.fetch_landing(game_id)
    except UpstreamError as exc:
        logger.warning("landing_unavailable", game_id=game_id, reason=exc.reason, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Game preview not found"
        ) from exc

    set_cache_headers(response, settings.cache_config.preview_seconds)
    return build_game_preview(landing, settings.team, game_id=game_id)
