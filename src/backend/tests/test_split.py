"""
Test suite for the share calculator and settlement advisor.

Tests cover:
- Proportional shares and cent rounding
- Zero-distance handling (no division by zero)
- Two-party payment directive
- Generic advice for one or three+ parties
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from autosplit.services.parser import Record
from autosplit.services.shares import ComputedShare, compute_shares
from autosplit.services.settlement import (
    advise_settlement,
    NoPaymentNeeded,
    PayFromTo,
    AwaitInput,
    GenericAdvice,
)
import pytest


def _records(*pairs):
    return [Record(name, distance) for name, distance in pairs]


class TestComputeShares:
    """Test proportional share computation."""

    def test_two_party_unequal(self):
        result = compute_shares(_records(("A", 150), ("B", 50)), 100)

        assert result.total_distance == 200
        assert result.shares == [
            ComputedShare("A", 150, 75.0, 75.0),
            ComputedShare("B", 50, 25.0, 25.0),
        ]

    def test_two_party_equal(self):
        result = compute_shares(_records(("A", 100), ("B", 100)), 50)

        assert [s.percentage for s in result.shares] == [50.0, 50.0]
        assert [s.amount for s in result.shares] == [25.0, 25.0]

    def test_rounds_to_cents(self):
        result = compute_shares(_records(("A", 1), ("B", 1), ("C", 1)), 10)

        assert [s.percentage for s in result.shares] == [33.33, 33.33, 33.33]
        assert [s.amount for s in result.shares] == [3.33, 3.33, 3.33]

    @pytest.mark.parametrize("distances,amount", [
        ([10, 20, 30], 50),
        ([1, 1, 1], 10),
        ([7, 13, 29, 41], 73.17),
        ([123456], 61.99),
        ([3, 0, 5], 0.01),
    ])
    def test_amounts_sum_to_total(self, distances, amount):
        records = [Record(f"P{i}", d) for i, d in enumerate(distances)]
        result = compute_shares(records, amount)

        assert abs(sum(s.amount for s in result.shares) - amount) <= 0.01 * len(records)
        assert abs(sum(s.percentage for s in result.shares) - 100) <= 0.01 * len(records)

    def test_zero_distance_gives_zeros(self):
        result = compute_shares(_records(("A", 0), ("B", 0)), 50)

        assert result.total_distance == 0
        assert all(s.percentage == 0 and s.amount == 0 for s in result.shares)

    def test_no_records(self):
        result = compute_shares([], 50)

        assert result.total_distance == 0
        assert result.shares == []

    def test_is_deterministic(self):
        records = _records(("A", 7), ("B", 13))
        assert compute_shares(records, 33.3) == compute_shares(records, 33.3)


class TestAdviseSettlement:
    """Test settlement directives."""

    def test_equal_amounts_need_no_payment(self):
        result = compute_shares(_records(("A", 100), ("B", 100)), 50)
        assert advise_settlement(result.shares, result.total_distance) == NoPaymentNeeded()

    def test_smaller_share_pays_larger_share(self):
        result = compute_shares(_records(("A", 150), ("B", 50)), 100)
        assert advise_settlement(result.shares, result.total_distance) == PayFromTo(
            payer="B", payee="A", amount=50.0
        )

    def test_first_party_pays_when_smaller(self):
        result = compute_shares(_records(("A", 40), ("B", 60)), 45)
        directive = advise_settlement(result.shares, result.total_distance)

        assert directive == PayFromTo(payer="A", payee="B", amount=9.0)

    def test_difference_is_rounded(self):
        result = compute_shares(_records(("A", 1), ("B", 2)), 10)
        directive = advise_settlement(result.shares, result.total_distance)

        # 3.33 vs 6.67
        assert directive == PayFromTo(payer="A", payee="B", amount=3.34)

    def test_zero_amount_with_distance_needs_no_payment(self):
        result = compute_shares(_records(("A", 10), ("B", 30)), 0)
        assert advise_settlement(result.shares, result.total_distance) == NoPaymentNeeded()

    @pytest.mark.parametrize("pairs", [
        [],
        [("A", 0)],
        [("A", 0), ("B", 0)],
        [("A", 0), ("B", 0), ("C", 0)],
    ])
    def test_no_distance_awaits_input(self, pairs):
        result = compute_shares(_records(*pairs), 50)
        assert advise_settlement(result.shares, result.total_distance) == AwaitInput()

    @pytest.mark.parametrize("pairs", [
        [("A", 10)],
        [("A", 10), ("B", 20), ("C", 30)],
        [("A", 10), ("B", 10), ("C", 10), ("D", 0)],
    ])
    def test_other_counts_get_generic_advice(self, pairs):
        result = compute_shares(_records(*pairs), 50)
        directive = advise_settlement(result.shares, result.total_distance)

        assert directive == GenericAdvice()
        assert not isinstance(directive, PayFromTo)
