"""
Share calculator: splits a total amount proportionally to distance.
"""

from dataclasses import dataclass
from typing import List, Sequence

from autosplit.services.parser import Record
from autosplit.utils.money import round2


@dataclass(frozen=True)
class ComputedShare:
    """A record with its percentage (0-100) and amount, both rounded to cents."""
    name: str
    distance: int
    percentage: float
    amount: float


@dataclass(frozen=True)
class ShareComputation:
    total_distance: int
    shares: List[ComputedShare]


def compute_shares(records: Sequence[Record], total_amount: float) -> ShareComputation:
    """
    Compute every record's share of the total amount.

    Per-row amounts are rounded independently, so they may sum to a cent or
    so more or less than the total.

    Args:
        records: Records in display order
        total_amount: Amount to split

    Returns:
        ShareComputation with the total distance and one share per record
    """
    total_distance = sum(record.distance for record in records)

    shares = []
    for record in records:
        fraction = record.distance / total_distance if total_distance > 0 else 0
        shares.append(ComputedShare(
            name=record.name,
            distance=record.distance,
            percentage=round2(fraction * 100),
            amount=round2(total_amount * fraction),
        ))

    return ShareComputation(total_distance=total_distance, shares=shares)
