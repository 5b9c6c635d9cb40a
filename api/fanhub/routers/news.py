"""News endpoints: aggregated articles and the live X search feed."""

from __future__ import annotations

from functools import partial
from typing import Any

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from ..clients import NewsClient, RateLimitedError, XSearchClient
from ..config import Settings
from ..dependencies import get_app_settings, get_news_client, get_x_client
from ..logging_config import get_logger
from ..services.fallback import fetch_with_fallback
from ..services.news_aggregator import aggregate_articles, fetch_all_sources
from ..services.social_feed import normalize_x_search, sample_payload
from ..utils.datetime_utils import format_utc, now_utc
from .common import serialize_article, set_cache_headers
from .schemas import NewsResponse

router = APIRouter(tags=["news"])
logger = get_logger(__name__)


def build_fetchers(news: NewsClient, settings: Settings) -> list[tuple[str, Any]]:
    """GNews first (when configured), then each RSS feed in declaration order."""
    fetchers: list[tuple[str, Any]] = []
    if settings.gnews_api_key:
        fetchers.append(("gnews", news.fetch_gnews))
    for url in settings.news_config.rss_sources:
        fetchers.append((url, partial(news.fetch_rss, url)))
    return fetchers


@router.get("/news", response_model=NewsResponse)
async def get_news(
    response: Response,
    news: NewsClient = Depends(get_news_client),
    settings: Settings = Depends(get_app_settings),
) -> NewsResponse | JSONResponse:
    try:
        source_lists = await fetch_all_sources(build_fetchers(news, settings))
        result = aggregate_articles(
            source_lists,
            settings.team.keywords,
            limit=settings.news_config.max_articles,
        )
    except Exception as exc:
        logger.exception("news_aggregation_failed", error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Failed to fetch news",
                "count": 0,
                "articles": [],
                "sources": 0,
                "timestamp": format_utc(now_utc()),
            },
        )

    logger.info("news_aggregated", count=result.count, returned=len(result.articles))
    set_cache_headers(response, settings.cache_config.news_seconds)
    return NewsResponse(
        count=result.count,
        articles=[serialize_article(article) for article in result.articles],
        sources=settings.news_source_count,
        timestamp=format_utc(now_utc()),
    )


@router.get("/news-search")
async def search_news(
    response: Response,
    q: str | None = Query(None, description="X search query; defaults to the team query"),
    x_client: XSearchClient = Depends(get_x_client),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """
    Live team posts from X.

    Sample rows are served when no bearer token is configured, when X rate
    limits the request (flagged with ``rate_limited``) and on any other error.
    """
    query = q or settings.social_config.default_query

    async def live() -> dict[str, Any]:
        return normalize_x_search(await x_client.search_recent(query))

    sourced = await fetch_with_fallback(live, sample_payload, source="x")
    set_cache_headers(response, settings.cache_config.news_search_seconds)
    if sourced.reason == RateLimitedError.reason:
        return sample_payload(rate_limited=True)
    return sourced.data
