"""Multi-source news aggregation.

Sources are fetched concurrently and isolated from each other; results are
de-duplicated by canonical link, filtered for team relevance, sorted newest
first and truncated.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Sequence

from ..logging_config import get_logger
from ..models import NewsArticle
from ..utils.datetime_utils import parse_published_at

logger = get_logger(__name__)

DEFAULT_MAX_ARTICLES = 50

SourceFetcher = Callable[[], Awaitable[list[NewsArticle]]]


@dataclass(frozen=True)
class AggregationResult:
    articles: list[NewsArticle]
    # Relevant articles before truncation
    count: int


def canonical_link(link: str) -> str:
    """Article identity: the link without its query string."""
    return link.split("?", 1)[0]


def build_keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    """Case-insensitive alternation of the team's name variants."""
    variants = sorted({kw.strip() for kw in keywords if kw.strip()}, key=len, reverse=True)
    if not variants:
        # Nothing to match against: keep nothing
        return re.compile(r"(?!x)x")
    return re.compile("|".join(re.escape(v) for v in variants), re.IGNORECASE)


def is_relevant(article: NewsArticle, pattern: re.Pattern[str]) -> bool:
    return bool(pattern.search(article.title) or pattern.search(article.summary or ""))


async def fetch_all_sources(
    fetchers: Sequence[tuple[str, SourceFetcher]],
) -> list[list[NewsArticle]]:
    """Run every source fetch concurrently.

    A source that raises contributes an empty list; the others are unaffected.
    Result order matches ``fetchers`` order.
    """
    results = await asyncio.gather(*(fetch() for _, fetch in fetchers), return_exceptions=True)
    source_lists: list[list[NewsArticle]] = []
    for (name, _), result in zip(fetchers, results):
        if isinstance(result, BaseException):
            logger.warning("news_source_failed", source=name, error=str(result))
            source_lists.append([])
        else:
            source_lists.append(list(result))
    return source_lists


def aggregate_articles(
    source_lists: Iterable[Iterable[NewsArticle]],
    keywords: Iterable[str],
    limit: int = DEFAULT_MAX_ARTICLES,
) -> AggregationResult:
    """Merge, de-duplicate, filter, sort and truncate articles."""
    pattern = build_keyword_pattern(keywords)
    seen: set[str] = set()
    unique: list[NewsArticle] = []
    for articles in source_lists:
        for article in articles:
            if not article.link or not article.title:
                continue
            key = canonical_link(article.link)
            if key in seen:
                continue
            seen.add(key)
            unique.append(article)

    relevant = [article for article in unique if is_relevant(article, pattern)]
    # sorted() is stable, so equal timestamps keep source order
    relevant = sorted(relevant, key=lambda a: parse_published_at(a.published_at), reverse=True)
    return AggregationResult(articles=relevant[:limit], count=len(relevant))
