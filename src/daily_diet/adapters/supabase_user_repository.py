"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from daily_diet.domain.models import UserRecord
from daily_diet.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def create_user(self, username: str, session_id: UUID) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"username": username, "session_id": str(session_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def get_by_session_id(self, session_id: UUID) -> UserRecord | None:
        """Return the user owning a session id, if present."""
        response = (
            self.client.table("users")
            .select("id, username, session_id")
            .eq("session_id", str(session_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row.get("username", "")),
        session_id=UUID(str(row["session_id"])),
    )
