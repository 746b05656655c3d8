"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.domain.ai_logs import AILogEntry

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/ai-logs", dependencies=[Depends(require_admin)])
async def list_ai_logs(
    request: Request, limit: int = Query(default=50, ge=1)
) -> dict[str, object]:
    """Return recent AI calls, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.ai_log_service.list_recent(limit)
    return {"logs": [_serialize_entry(entry) for entry in entries]}


@router.delete("/ai-logs", dependencies=[Depends(require_admin)])
async def clear_ai_logs(request: Request) -> dict[str, int]:
    """Delete every AI log entry."""
    container: AppContainer = request.app.state.container
    return {"deleted": container.ai_log_service.clear_all()}


@router.delete("/ai-logs/{entry_id}", dependencies=[Depends(require_admin)])
async def delete_ai_log(entry_id: UUID, request: Request) -> dict[str, str]:
    """Delete a single AI log entry."""
    container: AppContainer = request.app.state.container
    if not container.ai_log_service.delete(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}


def _serialize_entry(entry: AILogEntry) -> dict[str, object]:
    payload = asdict(entry)
    payload["request_type_display_name"] = entry.request_type_display_name
    return payload
