"""
Split pipeline: raw text and amount in, records, shares, directive and
summary text out. Every call recomputes from scratch.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from autosplit.services.parser import Record, RecordParser
from autosplit.services.settlement import SettlementDirective, advise_settlement
from autosplit.services.shares import ComputedShare, compute_shares
from autosplit.services.summary import format_summary

logger = logging.getLogger(__name__)


class ParseStatus(Enum):
    """Outcome of parsing, so callers know what to ask the user for."""
    AWAITING_INPUT = "awaiting_input"  # no text yet
    NO_RECORDS = "no_records"  # text present, nothing extracted
    PARSED = "parsed"


PARSE_MESSAGES = {
    ParseStatus.AWAITING_INPUT: "Geen regels — upload een foto of voeg regels toe.",
    ParseStatus.NO_RECORDS: "Kon geen regels vinden. Controleer tekst of voeg handmatig toe.",
    ParseStatus.PARSED: "",
}


@dataclass(frozen=True)
class ParseResult:
    status: ParseStatus
    records: List[Record]

    @property
    def message(self) -> str:
        return PARSE_MESSAGES[self.status]


@dataclass(frozen=True)
class SplitResult:
    total_amount: float
    total_distance: int
    shares: List[ComputedShare]
    directive: SettlementDirective
    summary: str

    @property
    def total_distance_label(self) -> str:
        if self.total_distance > 0:
            return f"Totaal kilometers: {self.total_distance}"
        return "Nog geen kilometers."


class SplitPipeline:
    """Runs parser, calculator, advisor and formatter in sequence."""

    def __init__(self, parser: RecordParser = None):
        self.parser = parser or RecordParser()

    def parse_text(self, text: str) -> ParseResult:
        if not text or not text.strip():
            return ParseResult(status=ParseStatus.AWAITING_INPUT, records=[])

        records = self.parser.parse(text)
        if not records:
            logger.info("Text present but no records extracted")
            return ParseResult(status=ParseStatus.NO_RECORDS, records=[])
        return ParseResult(status=ParseStatus.PARSED, records=records)

    def split(self, records: Sequence[Record], total_amount: float) -> SplitResult:
        computation = compute_shares(records, total_amount)
        directive = advise_settlement(computation.shares, computation.total_distance)
        summary = format_summary(total_amount, computation.shares, directive)

        logger.debug("Split computed", extra={
            "record_count": len(records),
            "total_distance": computation.total_distance,
            "directive": directive.kind,
        })
        return SplitResult(
            total_amount=total_amount,
            total_distance=computation.total_distance,
            shares=computation.shares,
            directive=directive,
            summary=summary,
        )

    def run(self, text: str, total_amount: float) -> SplitResult:
        """Parse text and split in one step."""
        return self.split(self.parse_text(text).records, total_amount)


def placeholder_record(position: int) -> Record:
    """Blank row for manual entry; ``position`` is 1-based."""
    return Record(name=f"Persoon {position}", distance=0)
