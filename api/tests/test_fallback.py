"""Tests for the data source with fallback helper."""

from __future__ import annotations

import pytest

from fanhub.clients.errors import (
    MissingCredentialsError,
    RateLimitedError,
    UpstreamStatusError,
)
from fanhub.services.fallback import fetch_with_fallback


def fallback() -> list[str]:
    return ["sample"]


class TestFetchWithFallback:
    @pytest.mark.asyncio
    async def test_primary_success(self) -> None:
        async def primary() -> list[str]:
            return ["live"]

        result = await fetch_with_fallback(primary, fallback, source="test")
        assert result.data == ["live"]
        assert result.sample is False
        assert result.reason is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("error", "reason"),
        [
            (RateLimitedError("x", "slow down", status_code=429), "rate_limited"),
            (MissingCredentialsError("x", "no token"), "missing_credentials"),
            (UpstreamStatusError("x", "HTTP 503", status_code=503), "upstream_status"),
            (ValueError("bad shape"), "upstream_error"),
        ],
    )
    async def test_failure_serves_sample(self, error: Exception, reason: str) -> None:
        async def primary() -> list[str]:
            raise error

        result = await fetch_with_fallback(primary, fallback, source="test")
        assert result.data == ["sample"]
        assert result.sample is True
        assert result.reason == reason
