"""Typed upstream failures.

Clients raise these instead of leaking httpx exceptions so callers can map
them to fallbacks or HTTP statuses. Nothing here is retried.
"""

from __future__ import annotations


class UpstreamError(Exception):
    """An upstream call failed (transport error, bad status or bad payload)."""

    reason = "upstream_error"

    def __init__(self, source: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message
        self.status_code = status_code


class UpstreamStatusError(UpstreamError):
    """The upstream answered with a non-success status code."""

    reason = "upstream_status"


class RateLimitedError(UpstreamStatusError):
    """The upstream answered 429 Too Many Requests."""

    reason = "rate_limited"


class MissingCredentialsError(UpstreamError):
    """The upstream requires a credential that is not configured."""

    reason = "missing_credentials"
