"""
Summary formatter for the copyable payment-request text.
"""

from typing import Sequence

from autosplit.services.settlement import (
    SettlementDirective,
    NoPaymentNeeded,
    PayFromTo,
    AwaitInput,
)
from autosplit.services.shares import ComputedShare
from autosplit.utils.money import format_number

NO_PAYMENT_SENTENCE = "Geen betaling nodig — bedragen zijn gelijk."
AWAIT_INPUT_SENTENCE = "Voer kilometers in om een samenvatting te krijgen."
GENERIC_ADVICE_SENTENCE = (
    "Bekijk de bedragen per persoon. Voor betalingen, vergelijk wie minder "
    "heeft bijgedragen en regel onderling de betaling."
)


def describe_directive(directive: SettlementDirective) -> str:
    """Render a directive as one Dutch sentence."""
    if isinstance(directive, NoPaymentNeeded):
        return NO_PAYMENT_SENTENCE
    if isinstance(directive, PayFromTo):
        return f"{directive.payer} moet €{format_number(directive.amount)} aan {directive.payee} betalen."
    if isinstance(directive, AwaitInput):
        return AWAIT_INPUT_SENTENCE
    return GENERIC_ADVICE_SENTENCE


def format_share_line(share: ComputedShare) -> str:
    return (
        f"{share.name}: {format_number(share.distance)} km — "
        f"{format_number(share.percentage)}% — €{format_number(share.amount)}"
    )


def format_summary(
    total_amount: float,
    shares: Sequence[ComputedShare],
    directive: SettlementDirective
) -> str:
    """
    Build the plain-text summary.

    Layout:
        Tankbeurt — totaal €<amount>
        <blank>
        one line per share
        <blank>
        Samenvatting: <sentence>
    """
    text = f"Tankbeurt — totaal €{format_number(total_amount)}\n\n"
    for share in shares:
        text += format_share_line(share) + "\n"
    text += f"\nSamenvatting: {describe_directive(directive)}"
    return text
