"""Ordering and on-diet streak detection over a user's snacks.

Streaks are found with island grouping: walking the snacks in creation order,
every on-diet snack gets the key ``position - rank`` where ``position`` is its
0-based index in the full ordered sequence and ``rank`` is its 1-based index
among on-diet snacks only. Both counters advance together while no off-diet
snack interrupts them, so consecutive on-diet snacks share a key and each key
identifies one contiguous run.
"""

from collections.abc import Iterable, Sequence

from daily_diet.domain.snacks import SnackRecord


def order_snacks(snacks: Iterable[SnackRecord]) -> list[SnackRecord]:
    """Return snacks in creation order, ties broken by id."""
    return sorted(snacks, key=lambda snack: (snack.created_at, snack.id))


def group_islands(ordered: Sequence[SnackRecord]) -> dict[int, list[SnackRecord]]:
    """Group on-diet snacks into contiguous runs keyed by island id.

    ``ordered`` must already be in creation order and belong to a single user;
    contiguity is defined by position in that sequence only.
    """
    islands: dict[int, list[SnackRecord]] = {}
    rank = 0
    for position, snack in enumerate(ordered):
        if not snack.on_diet:
            continue
        rank += 1
        islands.setdefault(position - rank, []).append(snack)
    return islands


def longest_streak(ordered: Sequence[SnackRecord]) -> int:
    """Return the length of the longest run of consecutive on-diet snacks."""
    runs = group_islands(ordered).values()
    return max((len(members) for members in runs), default=0)
