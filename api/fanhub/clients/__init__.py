"""Async clients for upstream data providers."""

from .errors import (
    MissingCredentialsError,
    RateLimitedError,
    UpstreamError,
    UpstreamStatusError,
)
from .news import NewsClient
from .nhl import NHLClient
from .social import XSearchClient

__all__ = [
    "MissingCredentialsError",
    "NHLClient",
    "NewsClient",
    "RateLimitedError",
    "UpstreamError",
    "UpstreamStatusError",
    "XSearchClient",
]
