"""News source clients (RSS feeds and the GNews search API)."""

from __future__ import annotations

from urllib.parse import urlparse

import httpx

from ..logging_config import get_logger
from ..models import NewsArticle
from ..services.feed_parser import parse_feed
from ..utils.parsing import as_dict, as_list
from .errors import MissingCredentialsError, RateLimitedError, UpstreamError, UpstreamStatusError

logger = get_logger(__name__)


def hostname(url: str) -> str:
    return urlparse(url).hostname or ""


class NewsClient:
    """Fetches articles from RSS feeds and GNews.

    Each call is one request. Errors are raised as UpstreamError so the
    aggregator can isolate a failing source.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        gnews_url: str,
        gnews_api_key: str | None,
        gnews_query: str,
        gnews_max_results: int = 20,
    ) -> None:
        self.client = client
        self.gnews_url = gnews_url
        self.gnews_api_key = gnews_api_key
        self.gnews_query = gnews_query
        self.gnews_max_results = gnews_max_results

    async def _get(self, source: str, url: str, params: dict | None = None) -> httpx.Response:
        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("news_fetch_error", source=source, error=str(exc))
            raise UpstreamError(source, str(exc)) from exc
        if response.status_code == 429:
            raise RateLimitedError(source, "rate limited", status_code=429)
        if not response.is_success:
            logger.warning("news_fetch_failed", source=source, status=response.status_code)
            raise UpstreamStatusError(
                source, f"HTTP {response.status_code}", status_code=response.status_code
            )
        return response

    async def fetch_rss(self, url: str) -> list[NewsArticle]:
        source = hostname(url)
        response = await self._get(source, url)
        articles = parse_feed(response.content, source=source)
        logger.info("rss_feed_parsed", source=source, count=len(articles))
        return articles

    async def fetch_gnews(self) -> list[NewsArticle]:
        if not self.gnews_api_key:
            raise MissingCredentialsError("gnews", "GNEWS_API_KEY is not configured")
        params = {
            "q": self.gnews_query,
            "lang": "en",
            "country": "ca",
            "max": str(self.gnews_max_results),
            "apikey": self.gnews_api_key,
        }
        response = await self._get("gnews", self.gnews_url, params=params)
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError("gnews", "invalid JSON payload") from exc

        articles: list[NewsArticle] = []
        for item in as_list(as_dict(payload).get("articles")):
            item = as_dict(item)
            link = str(item.get("url") or "")
            source_url = str(as_dict(item.get("source")).get("url") or link)
            articles.append(
                NewsArticle(
                    title=str(item.get("title") or ""),
                    link=link,
                    source=hostname(source_url),
                    published_at=str(item.get("publishedAt") or ""),
                    summary=str(item.get("description") or ""),
                )
            )
        logger.info("gnews_parsed", count=len(articles))
        return articles
