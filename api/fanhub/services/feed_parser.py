"""RSS/Atom feed parsing.

Bytes in, articles out. feedparser tolerates malformed XML (it flags the
feed as "bozo" instead of raising), so a broken entry degrades to blank
fields instead of failing the whole batch.
"""

from __future__ import annotations

from typing import Any

import feedparser
from bs4 import BeautifulSoup

from ..logging_config import get_logger
from ..models import NewsArticle

logger = get_logger(__name__)


def html_to_text(value: str) -> str:
    """Flatten an HTML fragment (feed descriptions often carry markup) to text."""
    if not value:
        return ""
    if "<" not in value:
        return value.strip()
    return BeautifulSoup(value, "html.parser").get_text(" ", strip=True)


def _field(entry: Any, name: str) -> str:
    value = entry.get(name, "") if hasattr(entry, "get") else ""
    return value.strip() if isinstance(value, str) else ""


def parse_feed(content: bytes, source: str) -> list[NewsArticle]:
    """Parse an RSS or Atom document into articles attributed to ``source``."""
    feed = feedparser.parse(content)
    if feed.bozo and not feed.entries:
        logger.warning("feed_parse_failed", source=source, error=str(feed.get("bozo_exception")))
        return []

    articles: list[NewsArticle] = []
    for entry in feed.entries:
        articles.append(
            NewsArticle(
                title=html_to_text(_field(entry, "title")),
                link=_field(entry, "link"),
                source=source,
                published_at=_field(entry, "published") or _field(entry, "updated"),
                summary=html_to_text(_field(entry, "summary")),
            )
        )
    return articles
