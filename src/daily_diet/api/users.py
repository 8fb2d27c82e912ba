"""User registration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from daily_diet.api.schemas import UserCreate
from daily_diet.config import parse_session_id

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate, request: Request, response: Response
) -> dict[str, object]:
    """Register a user and issue a session cookie if the caller has none."""
    container: AppContainer = request.app.state.container
    settings = container.settings
    existing = parse_session_id(request.cookies.get(settings.session_cookie_name))
    user = container.user_service.register(payload.username, existing)
    if existing is None:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=str(user.session_id),
            max_age=settings.session_max_age_seconds,
            path="/",
            httponly=True,
        )
    return {"user": {"id": str(user.id), "username": user.username}}
