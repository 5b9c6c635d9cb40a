"""Fan hub router bundle."""

from fastapi import APIRouter

from . import calendar, games, lineups, news, roster, schedule, social

router = APIRouter(prefix="/api")
router.include_router(calendar.router)
router.include_router(games.router)
router.include_router(lineups.router)
router.include_router(news.router)
router.include_router(roster.router)
router.include_router(schedule.router)
router.include_router(social.router)

__all__ = ["router"]
