"""Calendar export endpoints (iCalendar download and Google Calendar link)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import RedirectResponse

from ..clients import NHLClient
from ..config import Settings
from ..dependencies import get_app_settings, get_nhl_client
from ..logging_config import get_logger
from ..services.calendar import build_calendar, google_calendar_url
from .common import load_season_games, set_cache_headers

router = APIRouter(tags=["calendar"])
logger = get_logger(__name__)


@router.get("/calendar/{format}")
async def export_calendar(
    format: str,
    nhl: NHLClient = Depends(get_nhl_client),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """
    Export the season schedule.

    - ics: iCalendar attachment
    - google: redirect to a Google Calendar template for the next game
    """
    if format not in ("ics", "google"):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid format")

    games = await load_season_games(nhl, settings)
    try:
        if format == "ics":
            content = build_calendar(
                games, settings.team, event_hours=settings.calendar_event_hours
            )
            response = Response(
                content=content,
                media_type="text/calendar; charset=utf-8",
                headers={
                    "Content-Disposition": f'attachment; filename="{settings.team.slug}-schedule.ics"'
                },
            )
            set_cache_headers(response, settings.cache_config.schedule_seconds)
            return response

        url = google_calendar_url(games, settings.team, event_hours=settings.calendar_event_hours)
    except Exception as exc:
        logger.exception("calendar_generation_failed", format=format, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate calendar",
        ) from exc

    if not url:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return RedirectResponse(url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
