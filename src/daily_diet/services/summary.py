"""Summary service computing per-user snack aggregates."""

import logging
from dataclasses import dataclass
from uuid import UUID

from daily_diet.domain.snacks import SummarySnapshot
from daily_diet.services.snacks import SnackRepository
from daily_diet.services.streaks import longest_streak, order_snacks

_logger = logging.getLogger(__name__)


@dataclass
class SummaryService:
    """Service producing a fresh summary snapshot per request."""

    repository: SnackRepository

    def get_summary(self, user_id: UUID) -> SummarySnapshot:
        """Return totals and the best on-diet streak for a user.

        The user's snacks are fetched once and every aggregate is derived from
        that copy, so ``total`` and ``best_streak`` always describe the same
        state. A user without snacks gets an all-zero snapshot.
        """
        snacks = self.repository.list_snacks(user_id)
        foreign = [snack.id for snack in snacks if snack.user_id != user_id]
        if foreign:
            raise ValueError(f"Snacks {foreign} do not belong to user {user_id}")
        if not snacks:
            _logger.info("Summary computed: user_id=%s empty", user_id)
            return SummarySnapshot.empty()

        compliant = sum(1 for snack in snacks if snack.on_diet)
        snapshot = SummarySnapshot(
            total=len(snacks),
            compliant=compliant,
            non_compliant=len(snacks) - compliant,
            best_streak=longest_streak(order_snacks(snacks)),
        )
        _logger.info("Summary computed: user_id=%s snapshot=%s", user_id, snapshot)
        return snapshot
