"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from daily_diet.domain.models import UserRecord

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, username: str, session_id: UUID) -> UserRecord:
        """Create and return a new user record."""

    def get_by_session_id(self, session_id: UUID) -> UserRecord | None:
        """Return the user owning a session id, if present."""


@dataclass
class UserService:
    """Application service for user registration and session lookup."""

    repository: UserRepository

    def register(self, username: str, session_id: UUID | None = None) -> UserRecord:
        """Create a user, reusing the caller's session id when one is given.

        A session id already owned by a user returns that user unchanged, so a
        session never resolves to more than one owner.
        """
        if session_id is not None:
            existing = self.repository.get_by_session_id(session_id)
            if existing is not None:
                _logger.info("Session already registered: user_id=%s", existing.id)
                return existing
        resolved_session = session_id or uuid4()
        user = self.repository.create_user(username, resolved_session)
        _logger.info("User registered: user_id=%s", user.id)
        return user

    def resolve_session(self, session_id: UUID) -> UserRecord | None:
        """Return the user for a session id, or None for an unknown session."""
        user = self.repository.get_by_session_id(session_id)
        if user is None:
            _logger.warning("Unknown session id presented")
        return user
