"""Static fan social feed."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from ..services.social_feed import mock_social_feed
from ..utils.datetime_utils import format_utc, now_utc

router = APIRouter(tags=["social"])


@router.get("/social")
async def get_social_feed() -> dict[str, Any]:
    return {**mock_social_feed(), "lastUpdated": format_utc(now_utc())}
