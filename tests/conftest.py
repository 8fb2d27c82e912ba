"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from daily_diet.config import Settings
from daily_diet.containers import AppContainer
from daily_diet.domain.models import UserRecord
from daily_diet.domain.snacks import SnackRecord
from daily_diet.services.snacks import SnackRepository, SnackService
from daily_diet.services.summary import SummaryService
from daily_diet.services.users import UserRepository, UserService

BASE_TIME = datetime(2024, 1, 1, 8, 0, tzinfo=UTC)


def make_snacks(
    flags: list[bool], user_id: UUID | None = None
) -> list[SnackRecord]:
    """Build snacks in creation order with the given diet flags."""
    owner = user_id or uuid4()
    return [
        SnackRecord(
            id=uuid4(),
            user_id=owner,
            name=f"snack-{index}",
            description="",
            created_at=BASE_TIME + timedelta(minutes=index),
            on_diet=on_diet,
        )
        for index, on_diet in enumerate(flags)
    ]


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def create_user(self, username: str, session_id: UUID) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username, session_id=session_id)
        self.users[user.id] = user
        return user

    def get_by_session_id(self, session_id: UUID) -> UserRecord | None:
        for user in self.users.values():
            if user.session_id == session_id:
                return user
        return None


@dataclass
class InMemorySnackRepository(SnackRepository):
    """In-memory snack repository for tests."""

    snacks: dict[UUID, SnackRecord] = field(default_factory=dict)
    list_calls: int = 0
    created_count: int = 0

    def add(self, snacks: list[SnackRecord]) -> None:
        for snack in snacks:
            self.snacks[snack.id] = snack

    def list_snacks(self, user_id: UUID) -> list[SnackRecord]:
        self.list_calls += 1
        return [snack for snack in self.snacks.values() if snack.user_id == user_id]

    def get_snack(self, user_id: UUID, snack_id: UUID) -> SnackRecord | None:
        snack = self.snacks.get(snack_id)
        if snack is None or snack.user_id != user_id:
            return None
        return snack

    def create_snack(
        self, user_id: UUID, name: str, description: str, on_diet: bool
    ) -> SnackRecord:
        snack = SnackRecord(
            id=uuid4(),
            user_id=user_id,
            name=name,
            description=description,
            created_at=BASE_TIME + timedelta(minutes=self.created_count),
            on_diet=on_diet,
        )
        self.created_count += 1
        self.snacks[snack.id] = snack
        return snack

    def update_snack(
        self,
        user_id: UUID,
        snack_id: UUID,
        name: str,
        description: str,
        on_diet: bool,
    ) -> SnackRecord | None:
        existing = self.get_snack(user_id, snack_id)
        if existing is None:
            return None
        updated = replace(
            existing, name=name, description=description, on_diet=on_diet
        )
        self.snacks[snack_id] = updated
        return updated

    def delete_snack(self, user_id: UUID, snack_id: UUID) -> bool:
        if self.get_snack(user_id, snack_id) is None:
            return False
        del self.snacks[snack_id]
        return True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def snack_repository() -> InMemorySnackRepository:
    return InMemorySnackRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    snack_repository: InMemorySnackRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        snack_service=SnackService(snack_repository),
        summary_service=SummaryService(snack_repository),
    )
