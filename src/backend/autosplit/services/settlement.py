"""
Settlement advisor: turns computed shares into a payment directive.
"""

from dataclasses import dataclass
from typing import Sequence, Union

from autosplit.services.shares import ComputedShare
from autosplit.utils.money import round2


@dataclass(frozen=True)
class NoPaymentNeeded:
    kind = "no_payment_needed"


@dataclass(frozen=True)
class PayFromTo:
    """The payer owes the payee ``amount``."""
    payer: str
    payee: str
    amount: float
    kind = "pay_from_to"


@dataclass(frozen=True)
class AwaitInput:
    kind = "await_input"


@dataclass(frozen=True)
class GenericAdvice:
    kind = "generic_advice"


SettlementDirective = Union[NoPaymentNeeded, PayFromTo, AwaitInput, GenericAdvice]


def advise_settlement(shares: Sequence[ComputedShare], total_distance: float) -> SettlementDirective:
    """
    Decide who pays whom.

    Only two-party splits get a concrete payment: whoever has the smaller
    amount pays the other the difference. This does not model who actually
    paid at the pump.

    Args:
        shares: Computed shares in display order
        total_distance: Sum of all distances

    Returns:
        A SettlementDirective variant
    """
    if len(shares) == 2 and total_distance > 0:
        first, second = shares
        diff = round2(abs(first.amount - second.amount))
        if diff == 0:
            return NoPaymentNeeded()
        if first.amount > second.amount:
            return PayFromTo(payer=second.name, payee=first.name, amount=diff)
        return PayFromTo(payer=first.name, payee=second.name, amount=diff)

    if total_distance == 0:
        return AwaitInput()

    return GenericAdvice()
