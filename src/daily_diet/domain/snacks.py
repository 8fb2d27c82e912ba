"""Domain models for logged snacks and their summary."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SnackRecord:
    """A logged snack flagged as on or off the diet."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    created_at: datetime
    on_diet: bool


@dataclass(frozen=True)
class SummarySnapshot:
    """Per-user snack totals and the best on-diet streak."""

    total: int
    compliant: int
    non_compliant: int
    best_streak: int

    @classmethod
    def empty(cls) -> "SummarySnapshot":
        """Return the snapshot for a user with no snacks."""
        return cls(total=0, compliant=0, non_compliant=0, best_streak=0)
