"""Daily food log and dashboard endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from calorie_tracker.api.models import FoodEntryRequest  # noqa: TC001

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard")
async def dashboard(request: Request, day: date | None = None) -> dict[str, object]:
    """Return a day's intake against the daily goals."""
    container: AppContainer = request.app.state.container
    return asdict(container.daily_log_service.summary(day))


@router.post("/log/entries")
async def add_entry(payload: FoodEntryRequest, request: Request) -> dict[str, object]:
    """Log a food."""
    container: AppContainer = request.app.state.container
    entry = container.daily_log_service.add_entry(**payload.model_dump())
    return {"entry": asdict(entry)}


@router.delete("/log/entries/{entry_id}")
async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
    """Remove a logged food."""
    container: AppContainer = request.app.state.container
    if not container.daily_log_service.delete_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}
