"""Supabase implementation for snack persistence."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from daily_diet.domain.snacks import SnackRecord
from daily_diet.services.snacks import SnackRepository

_COLUMNS = "id, user_id, name, description, created_at, on_diet"


@dataclass
class SupabaseSnackRepository(SnackRepository):
    """Supabase-backed repository for user snacks."""

    client: Client

    def list_snacks(self, user_id: UUID) -> list[SnackRecord]:
        """Return every snack owned by the user in creation order."""
        response = (
            self.client.table("snacks")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_snack(row) for row in response.data or []]

    def get_snack(self, user_id: UUID, snack_id: UUID) -> SnackRecord | None:
        """Return a snack by id if the user owns it."""
        response = (
            self.client.table("snacks")
            .select(_COLUMNS)
            .eq("id", str(snack_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_snack(response.data[0])

    def create_snack(
        self, user_id: UUID, name: str, description: str, on_diet: bool
    ) -> SnackRecord:
        """Create a snack and return it."""
        response = (
            self.client.table("snacks")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": name,
                    "description": description,
                    "on_diet": on_diet,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create snack")
        return _parse_snack(response.data[0])

    def update_snack(
        self,
        user_id: UUID,
        snack_id: UUID,
        name: str,
        description: str,
        on_diet: bool,
    ) -> SnackRecord | None:
        """Update a snack owned by the user and return it."""
        response = (
            self.client.table("snacks")
            .update({"name": name, "description": description, "on_diet": on_diet})
            .eq("id", str(snack_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_snack(response.data[0])

    def delete_snack(self, user_id: UUID, snack_id: UUID) -> bool:
        """Delete a snack owned by the user."""
        response = (
            self.client.table("snacks")
            .delete()
            .eq("id", str(snack_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_snack(row: dict[str, object]) -> SnackRecord:
    """Parse a snack row into a domain model."""
    return SnackRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        on_diet=bool(row.get("on_diet", False)),
    )
