"""Configuration for the fan hub API.

Uses Pydantic Settings to load configuration from environment variables,
with grouped settings held in nested models. Local development reads the
repository root .env file.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .validate_env import validate_env


class TeamConfig(BaseModel):
    """The single team this hub covers."""

    id: int = 10
    name: str = "Toronto Maple Leafs"
    short_name: str = "Leafs"
    abbreviation: str = "TOR"
    slug: str = "leafs"
    arena: str = "Scotiabank Arena, Toronto"
    timezone: str = "America/Toronto"
    # Matched case-insensitively against article titles and summaries
    keywords: list[str] = Field(
        default_factory=lambda: ["Toronto Maple Leafs", "Maple Leafs", "Leafs"]
    )
    ticket_url_template: str = (
        "https://www.ticketmaster.ca/toronto-maple-leafs-tickets/artist/806034?game={game_id}"
    )
    calendar_domain: str = "leafsnews.com"
    regional_network: str = "Sportsnet Ontario"
    regional_streaming: str = "Sportsnet NOW"


class NewsConfig(BaseModel):
    rss_sources: list[str] = Field(
        default_factory=lambda: [
            "https://news.google.com/rss/search?q=Toronto+Maple+Leafs&hl=en-CA&gl=CA&ceid=CA:en",
            "https://thehockeywriters.com/feed/",
        ]
    )
    gnews_url: str = "https://gnews.io/api/v4/search"
    gnews_query: str = '"Toronto Maple Leafs"'
    gnews_max_results: int = 20
    max_articles: int = 50


class SocialConfig(BaseModel):
    x_search_url: str = "https://api.twitter.com/2/tweets/search/recent"
    default_query: str = (
        '(#LeafsForever OR #GoLeafsGo OR #LeafsNation OR "Toronto Maple Leafs" OR Leafs) '
        "lang:en -is:retweet -is:reply"
    )
    max_results: int = 25


class RecapConfig(BaseModel):
    # Goal margin above which headlines use the stronger wording
    dominant_margin: int = 2
    # Final period numbers above this are described as decided late
    overtime_after_period: int = 2


class CacheConfig(BaseModel):
    """Cache-Control max-age hints (seconds) per endpoint."""

    schedule_seconds: int = 3600
    scores_seconds: int = 60
    roster_seconds: int = 3600
    recap_seconds: int = 3600
    preview_seconds: int = 300
    news_seconds: int = 600
    news_search_seconds: int = 10


class Settings(BaseSettings):
    """Environment-driven settings with defaults for local development."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), "..", "..", ".env"),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="allow",
    )

    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")
    cors_origins: str | None = Field(default=None, alias="ALLOWED_CORS_ORIGINS")
    site_name: str = Field(default="Leafs News", alias="SITE_NAME")
    site_url: str = Field(default="http://localhost:8000", alias="SITE_URL")

    nhl_api_base: str = Field(default="https://api-web.nhle.com/v1", alias="NHL_API_BASE")
    request_timeout_seconds: float = Field(default=15.0, alias="REQUEST_TIMEOUT_SECONDS")
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; LeafsNews/1.0)", alias="USER_AGENT"
    )
    calendar_event_hours: int = Field(default=3, alias="CALENDAR_EVENT_HOURS")

    gnews_api_key: str | None = Field(default=None, alias="GNEWS_API_KEY")
    x_bearer_token: str | None = Field(default=None, alias="X_BEARER_TOKEN")
    news_rss_sources: str | None = Field(default=None, alias="NEWS_RSS_SOURCES")

    team: TeamConfig = Field(default_factory=TeamConfig)
    news_config: NewsConfig = Field(default_factory=NewsConfig)
    social_config: SocialConfig = Field(default_factory=SocialConfig)
    recap_config: RecapConfig = Field(default_factory=RecapConfig)
    cache_config: CacheConfig = Field(default_factory=CacheConfig)

    @model_validator(mode="after")
    def _apply_overrides(self) -> Settings:
        """Let NEWS_RSS_SOURCES (comma separated) replace the default feed list."""
        if self.news_rss_sources:
            self.news_config.rss_sources = [
                url.strip() for url in self.news_rss_sources.split(",") if url.strip()
            ]
        return self

    @property
    def allowed_cors_origins(self) -> list[str]:
        if self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]

    @property
    def news_source_count(self) -> int:
        """Number of news sources that will actually be queried."""
        return len(self.news_config.rss_sources) + (1 if self.gnews_api_key else 0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    validate_env()
    return Settings()


settings = get_settings()
