"""X (Twitter) recent-search client."""

from __future__ import annotations

import httpx

from ..logging_config import get_logger
from .errors import MissingCredentialsError, RateLimitedError, UpstreamError, UpstreamStatusError

logger = get_logger(__name__)

SOURCE = "x"

TWEET_FIELDS = ["created_at", "public_metrics", "lang", "possibly_sensitive", "entities", "attachments"]
EXPANSIONS = ["author_id", "attachments.media_keys"]
USER_FIELDS = ["name", "username", "verified", "profile_image_url"]
MEDIA_FIELDS = ["type", "url", "preview_image_url", "alt_text", "width", "height"]


def build_search_params(query: str, max_results: int) -> dict[str, str]:
    return {
        "query": query,
        "max_results": str(max_results),
        "tweet.fields": ",".join(TWEET_FIELDS),
        "expansions": ",".join(EXPANSIONS),
        "user.fields": ",".join(USER_FIELDS),
        "media.fields": ",".join(MEDIA_FIELDS),
    }


class XSearchClient:
    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        search_url: str,
        bearer_token: str | None,
        max_results: int = 25,
    ) -> None:
        self.client = client
        self.search_url = search_url
        self.bearer_token = bearer_token
        self.max_results = max_results

    async def search_recent(self, query: str) -> dict:
        """Run one recent-search query and return the raw JSON payload."""
        if not self.bearer_token:
            raise MissingCredentialsError(SOURCE, "X_BEARER_TOKEN is not configured")
        try:
            response = await self.client.get(
                self.search_url,
                params=build_search_params(query, self.max_results),
                headers={"Authorization": f"Bearer {self.bearer_token}"},
            )
        except httpx.HTTPError as exc:
            logger.warning("x_search_error", error=str(exc))
            raise UpstreamError(SOURCE, str(exc)) from exc

        if response.status_code == 429:
            logger.warning("x_search_rate_limited")
            raise RateLimitedError(SOURCE, "rate limited", status_code=429)
        if not response.is_success:
            logger.error("x_search_failed", status=response.status_code, body=response.text[:200])
            raise UpstreamStatusError(
                SOURCE, f"HTTP {response.status_code}", status_code=response.status_code
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(SOURCE, "invalid JSON payload") from exc
        if not isinstance(payload, dict):
            raise UpstreamError(SOURCE, "search payload is not an object")
        return payload
