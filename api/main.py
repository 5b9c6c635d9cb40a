from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fanhub.config import settings
from fanhub.logging_config import configure_logging
from fanhub.middleware.logging import StructuredLoggingMiddleware
from fanhub.routers import router as api_router

configure_logging(settings.environment, settings.log_level)

app = FastAPI(title="fanhub-api", version="1.0.0")

app.add_middleware(StructuredLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/healthz")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
