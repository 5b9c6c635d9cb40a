"""FastAPI dependencies: upstream clients and the lineup store.

Tests replace these through ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Depends

from ..clients import NewsClient, NHLClient, XSearchClient
from ..config import Settings, get_settings
from ..services.lineups import InMemoryLineupStore, LineupStore

_lineup_store: LineupStore | None = None


def get_app_settings() -> Settings:
    return get_settings()


async def get_http_client(
    settings: Settings = Depends(get_app_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """One AsyncClient per request, closed once the response is sent."""
    async with httpx.AsyncClient(
        timeout=settings.request_timeout_seconds,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    ) as client:
        yield client


def get_nhl_client(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> NHLClient:
    return NHLClient(client, settings.nhl_api_base)


def get_news_client(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> NewsClient:
    news = settings.news_config
    return NewsClient(
        client,
        gnews_url=news.gnews_url,
        gnews_api_key=settings.gnews_api_key,
        gnews_query=news.gnews_query,
        gnews_max_results=news.gnews_max_results,
    )


def get_x_client(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> XSearchClient:
    social = settings.social_config
    return XSearchClient(
        client,
        search_url=social.x_search_url,
        bearer_token=settings.x_bearer_token,
        max_results=social.max_results,
    )


def get_lineup_store() -> LineupStore:
    """Process-wide lineup store, created on first use."""
    global _lineup_store
    if _lineup_store is None:
        _lineup_store = InMemoryLineupStore()
    return _lineup_store


__all__ = [
    "get_app_settings",
    "get_http_client",
    "get_lineup_store",
    "get_news_client",
    "get_nhl_client",
    "get_x_client",
]
