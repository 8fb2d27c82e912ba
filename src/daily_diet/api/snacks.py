"""Snack endpoints scoped to the session cookie's user."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from daily_diet.api.schemas import SnackPayload
from daily_diet.config import parse_session_id
from daily_diet.domain.models import UserRecord  # noqa: TC001
from daily_diet.domain.snacks import SnackRecord, SummarySnapshot

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer

router = APIRouter(prefix="/snacks", tags=["snacks"])


async def require_user(request: Request) -> UserRecord:
    """Resolve the session cookie to its user."""
    container: AppContainer = request.app.state.container
    raw = request.cookies.get(container.settings.session_cookie_name)
    session_id = parse_session_id(raw)
    if session_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    user = container.user_service.resolve_session(session_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Session ID does not exist",
        )
    return user


@router.get("")
async def list_snacks(
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return the user's snacks in creation order."""
    container: AppContainer = request.app.state.container
    snacks = container.snack_service.list_snacks(user.id)
    return {"snacks": [_serialize_snack(snack) for snack in snacks]}


@router.get("/summary")
async def snack_summary(
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return snack totals and the best on-diet streak."""
    container: AppContainer = request.app.state.container
    summary = container.summary_service.get_summary(user.id)
    return {"summary": _serialize_summary(summary)}


@router.get("/{snack_id}")
async def get_snack(
    snack_id: UUID,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Return a single snack."""
    container: AppContainer = request.app.state.container
    snack = container.snack_service.get_snack(user.id, snack_id)
    if snack is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"snack": _serialize_snack(snack)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_snack(
    payload: SnackPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Log a new snack."""
    container: AppContainer = request.app.state.container
    snack = container.snack_service.create_snack(
        user.id, payload.name, payload.description, payload.on_diet
    )
    return {"snack": _serialize_snack(snack)}


@router.put("/{snack_id}")
async def update_snack(
    snack_id: UUID,
    payload: SnackPayload,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Replace a snack's name, description and diet flag."""
    container: AppContainer = request.app.state.container
    snack = container.snack_service.update_snack(
        user.id, snack_id, payload.name, payload.description, payload.on_diet
    )
    if snack is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"snack": _serialize_snack(snack)}


@router.delete("/{snack_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_snack(
    snack_id: UUID,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> Response:
    """Delete a snack."""
    container: AppContainer = request.app.state.container
    if not container.snack_service.delete_snack(user.id, snack_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _serialize_snack(snack: SnackRecord) -> dict[str, object]:
    return {
        "id": str(snack.id),
        "user_id": str(snack.user_id),
        "name": snack.name,
        "description": snack.description,
        "created_at": snack.created_at.isoformat(),
        "on_diet": snack.on_diet,
    }


def _serialize_summary(summary: SummarySnapshot) -> dict[str, int]:
    return {
        "total": summary.total,
        "compliant": summary.compliant,
        "non_compliant": summary.non_compliant,
        "best_streak": summary.best_streak,
    }
