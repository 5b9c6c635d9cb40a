"""Lineup depth chart endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..dependencies import get_lineup_store
from ..services.lineups import LineupStore, lineup_payload, record_lineup_change, serialize_change
from .schemas import LineupChangeEntry, LineupChangeRequest, LineupChangeResponse, LineupResponse

router = APIRouter(tags=["lineups"])


@router.get("/lineups", response_model=LineupResponse)
async def get_lineups(store: LineupStore = Depends(get_lineup_store)) -> LineupResponse:
    return LineupResponse(**lineup_payload(store))


@router.post("/lineups", response_model=LineupChangeResponse)
async def post_lineup_change(
    payload: LineupChangeRequest,
    store: LineupStore = Depends(get_lineup_store),
) -> LineupChangeResponse:
    """Record a lineup change; ``confirm`` also marks the named players confirmed."""
    details = payload.details.model_dump(by_alias=True, exclude_none=True)
    change = record_lineup_change(store, payload.action, payload.situation, details)
    return LineupChangeResponse(success=True, change=LineupChangeEntry(**serialize_change(change)))
