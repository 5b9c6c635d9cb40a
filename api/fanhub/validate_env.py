"""Fail-fast environment validation for the API service."""

from __future__ import annotations

import os
from functools import lru_cache


ALLOWED_ENVIRONMENTS = {"development", "staging", "production"}


def _validate_environment_value(environment: str) -> None:
    if environment not in ALLOWED_ENVIRONMENTS:
        allowed = ", ".join(sorted(ALLOWED_ENVIRONMENTS))
        raise RuntimeError(f"ENVIRONMENT must be one of: {allowed}.")


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"{name} is required and must be set before startup.")
    return value.strip()


@lru_cache(maxsize=1)
def validate_env() -> None:
    """Validate environment variables before the API starts.

    ENVIRONMENT defaults to development. Production deployments must set an
    explicit, non-local CORS allow list.
    """
    environment = (os.getenv("ENVIRONMENT") or "development").strip()
    _validate_environment_value(environment)

    if environment == "production":
        allowed_cors = _require_env("ALLOWED_CORS_ORIGINS")
        if "localhost" in allowed_cors or "127.0.0.1" in allowed_cors:
            raise RuntimeError("ALLOWED_CORS_ORIGINS must not include localhost in production.")
