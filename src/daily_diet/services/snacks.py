"""Snack logging services."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from daily_diet.domain.snacks import SnackRecord
from daily_diet.services.streaks import order_snacks


class SnackRepository(Protocol):
    """Persistence interface for snacks, always scoped to one user."""

    def list_snacks(self, user_id: UUID) -> list[SnackRecord]:
        """Return every snack owned by the user."""

    def get_snack(self, user_id: UUID, snack_id: UUID) -> SnackRecord | None:
        """Return a snack by id if the user owns it."""

    def create_snack(
        self, user_id: UUID, name: str, description: str, on_diet: bool
    ) -> SnackRecord:
        """Create a snack and return it."""

    def update_snack(
        self,
        user_id: UUID,
        snack_id: UUID,
        name: str,
        description: str,
        on_diet: bool,
    ) -> SnackRecord | None:
        """Update a snack and return it, or None if the user has no such snack."""

    def delete_snack(self, user_id: UUID, snack_id: UUID) -> bool:
        """Delete a snack, returning True if a row was removed."""


@dataclass
class SnackService:
    """Application service for snack CRUD."""

    repository: SnackRepository

    def list_snacks(self, user_id: UUID) -> list[SnackRecord]:
        """Return the user's snacks in creation order."""
        return order_snacks(self.repository.list_snacks(user_id))

    def get_snack(self, user_id: UUID, snack_id: UUID) -> SnackRecord | None:
        return self.repository.get_snack(user_id, snack_id)

    def create_snack(
        self, user_id: UUID, name: str, description: str, on_diet: bool = False
    ) -> SnackRecord:
        return self.repository.create_snack(user_id, name, description, on_diet)

    def update_snack(
        self,
        user_id: UUID,
        snack_id: UUID,
        name: str,
        description: str,
        on_diet: bool,
    ) -> SnackRecord | None:
        return self.repository.update_snack(
            user_id, snack_id, name, description, on_diet
        )

    def delete_snack(self, user_id: UUID, snack_id: UUID) -> bool:
        return self.repository.delete_snack(user_id, snack_id)
