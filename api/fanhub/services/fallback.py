"""Data source with fallback.

Every endpoint that can serve sample data goes through fetch_with_fallback:
try the live source, otherwise serve the fixture and say so.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, TypeVar

from ..clients.errors import UpstreamError
from ..logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Sourced(Generic[T]):
    """A payload tagged with where it came from."""

    data: T
    sample: bool = False
    reason: str | None = None


async def fetch_with_fallback(
    primary: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    *,
    source: str,
) -> Sourced[T]:
    """Await ``primary``; on failure return ``fallback()`` marked as sample data.

    UpstreamError subclasses carry their own reason (rate_limited,
    missing_credentials, upstream_status). Anything else raised while
    fetching or shaping the primary payload is reported as upstream_error.
    """
    try:
        data = await primary()
    except UpstreamError as exc:
        logger.warning("fallback_used", source=source, reason=exc.reason, error=str(exc))
        return Sourced(data=fallback(), sample=True, reason=exc.reason)
    except Exception as exc:
        logger.exception("fallback_used", source=source, reason="upstream_error", error=str(exc))
        return Sourced(data=fallback(), sample=True, reason="upstream_error")
    return Sourced(data=data)
