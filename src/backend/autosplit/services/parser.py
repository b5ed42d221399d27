"""
Logbook parser service for extracting name/distance records from OCR text.

Two strategies are tried per line, in order:

1. Primary pattern: the whole line reads as ``<name> [:|-] <digits> [km]``
   ("Jan 150", "Pieter: 100 km", "Anna - 75").
2. Token pairing: the line is split on whitespace and consumed two tokens at
   a time as (name, distance), e.g. "Jan 150 Pieter 100".

A line handled by the primary pattern never falls through to token pairing.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternSpec:
    """A named regex pattern with example and notes for documentation."""
    name: str
    pattern: str
    example: str
    notes: Optional[str] = None
    flags: int = re.IGNORECASE
    compiled: re.Pattern = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'compiled', re.compile(self.pattern, self.flags))


@dataclass(frozen=True)
class Record:
    """One logbook entry: who drove and how many kilometres."""
    name: str
    distance: int


LINE_BREAK = re.compile(r'\r?\n')
NON_DIGITS = re.compile(r'[^0-9]')

NAME_DISTANCE_PATTERN = PatternSpec(
    name="name_distance",
    pattern=(
        r'^(?P<name>[A-Za-zÀ-ÿ0-9_\- ]{2,30}?)'
        r'\s*[:\-]?\s*'
        r'(?P<distance>[0-9]{1,6})'
        r'(?:\s*km)?$'
    ),
    example="Pieter: 100 km",
    notes="Shortest name wins; names with a word starting in a digit are rejected",
)


def split_lines(text: str) -> List[str]:
    """Split text on line breaks, trim every line and drop the empty ones."""
    if not text:
        return []
    lines = (line.strip() for line in LINE_BREAK.split(text))
    return [line for line in lines if line]


def match_primary(line: str) -> Optional[Record]:
    """
    Match a single line against the primary name/distance pattern.

    Args:
        line: A trimmed, non-empty line

    Returns:
        Record, or None when the line does not have the primary shape
    """
    match = NAME_DISTANCE_PATTERN.compiled.match(line)
    if not match:
        return None

    name = match.group('name').strip()
    # "Jan 150 Pieter" is two entries on one line, not a name
    if not name or any(token[0].isdigit() for token in name.split()):
        return None

    try:
        distance = int(match.group('distance'))
    except ValueError:
        return None

    return Record(name=name, distance=distance)


def pair_tokens(line: str) -> List[Record]:
    """
    Read a line as alternating name and distance tokens.

    The distance token keeps only its digits ("150km" -> 150). Pairs without
    digits are skipped and a trailing unpaired token is dropped.
    """
    tokens = line.split()
    records = []
    for i in range(0, len(tokens) - 1, 2):
        digits = NON_DIGITS.sub('', tokens[i + 1])
        if not digits:
            continue
        try:
            distance = int(digits)
        except ValueError:
            # Past the interpreter's int-from-string digit limit
            logger.debug("Skipping oversized distance for %r", tokens[i])
            continue
        records.append(Record(name=tokens[i], distance=distance))
    return records


def extract_pairs(line: str) -> List[Record]:
    """Extract every record a single line contributes."""
    record = match_primary(line)
    if record is not None:
        return [record]
    return pair_tokens(line)


class RecordParser:
    """Service for parsing logbook text into ordered records."""

    def parse(self, text: str) -> List[Record]:
        """
        Parse raw text into records, preserving line and pair order.

        Never raises: unparsable input gives an empty list.

        Args:
            text: Raw OCR or user-edited text

        Returns:
            List of Record
        """
        records: List[Record] = []
        lines = split_lines(text)

        for line_number, line in enumerate(lines):
            found = extract_pairs(line)
            if not found:
                logger.debug("No records on line %d: %r", line_number, line)
            records.extend(found)

        logger.info("Parsed logbook text", extra={
            "line_count": len(lines),
            "record_count": len(records),
        })
        return records


def parse_lines_to_pairs(text: str) -> List[Record]:
    """Parse text into records with a default RecordParser."""
    return RecordParser().parse(text)
