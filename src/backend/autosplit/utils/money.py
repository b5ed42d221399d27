"""
Shared number utilities for amounts and distances.

Handles the inputs the split form receives:
- Plain numbers: 50, 50.0
- Strings: "50", "12.50", "12,50", "€ 12,50"
- US and European thousands: "1,234.56", "1.234,56", "1 234,56"
- Garbage: "", None, "abc", NaN, inf -> 0
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Union
import math
import re
import sys

Number = Union[int, float]

# Smallest step between 1.0 and the next float; added before rounding so
# values like 1.005 (stored as 1.00499999...) still round up.
EPSILON = sys.float_info.epsilon


def round2(value: float) -> float:
    """
    Round to two decimals, half away from zero.

    Examples:
        >>> round2(1.005)
        1.01
        >>> round2(-1.005)
        -1.01
    """
    scaled = (abs(value) + EPSILON) * 100
    return math.copysign(math.floor(scaled + 0.5) / 100, value)


class MoneyFormat(Enum):
    """Money format locale hints."""
    US = "US"  # 1,234.56
    EUROPEAN = "EUROPEAN"  # 1.234,56 or 1 234,56
    AUTO = "AUTO"  # Auto-detect based on patterns


def parse_money(amount_str: str, format_hint: Optional[MoneyFormat] = None) -> Optional[Decimal]:
    """
    Parse a money string with multi-locale support.

    Negative amounts are rejected.

    Args:
        amount_str: String containing amount (e.g., "€ 62,40", "1.234,56")
        format_hint: Optional locale hint (US, EUROPEAN, AUTO)

    Returns:
        Decimal amount or None if parsing fails

    Examples:
        >>> parse_money("1.234,56")
        Decimal('1234.56')
        >>> parse_money("1,234.56")
        Decimal('1234.56')
    """
    if not amount_str or not isinstance(amount_str, str):
        return None

    cleaned = amount_str.strip()
    if cleaned.startswith('-') or (cleaned.startswith('(') and cleaned.endswith(')')):
        return None

    # Strip currency symbols and codes: €, $, EUR, USD, ...
    cleaned = re.sub(r'[$£€¥]\s*|[A-Z]{3}\s*', '', cleaned, flags=re.IGNORECASE)
    cleaned = cleaned.strip()

    if not cleaned:
        return None

    detected_format = format_hint or MoneyFormat.AUTO
    if detected_format == MoneyFormat.AUTO:
        detected_format = _detect_money_format(cleaned)

    try:
        if detected_format == MoneyFormat.EUROPEAN:
            return _parse_european_format(cleaned)
        return _parse_us_format(cleaned)
    except (InvalidOperation, ValueError):
        return None


def _detect_money_format(amount_str: str) -> MoneyFormat:
    """
    Auto-detect money format based on separator patterns.

    Heuristics:
    - Ends with a comma and one or two digits ("12,5", "1.234,56"): European
    - Space as thousands separator without a dot: European
    - Dot before the last comma: European
    - Otherwise US
    """
    if re.search(r',\d{1,2}$', amount_str):
        return MoneyFormat.EUROPEAN

    if ' ' in amount_str and '.' not in amount_str:
        return MoneyFormat.EUROPEAN

    if '.' in amount_str and ',' in amount_str:
        if amount_str.index('.') < amount_str.rindex(','):
            return MoneyFormat.EUROPEAN

    return MoneyFormat.US


def _parse_us_format(amount_str: str) -> Optional[Decimal]:
    """Parse US format: comma thousands, dot decimal (1,234.56)."""
    cleaned = amount_str.replace(',', '').replace(' ', '')
    try:
        return Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return None


def _parse_european_format(amount_str: str) -> Optional[Decimal]:
    """Parse European format: dot or space thousands, comma decimal (1.234,56)."""
    cleaned = amount_str.replace('.', '').replace(' ', '').replace(',', '.')
    try:
        return Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return None


def parse_amount(raw: Any) -> float:
    """
    Parse a user-entered total amount.

    Returns 0.0 for anything that is not a finite, non-negative number.

    Examples:
        >>> parse_amount("12,50")
        12.5
        >>> parse_amount("€ 1.234,56")
        1234.56
        >>> parse_amount(float("nan"))
        0.0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float, Decimal)):
        try:
            value = float(raw)
        except (OverflowError, ValueError):
            return 0.0
    elif isinstance(raw, str):
        parsed = parse_money(raw)
        if parsed is None:
            return 0.0
        value = float(parsed)
    else:
        return 0.0

    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def parse_distance(raw: Any) -> int:
    """
    Parse a user-entered distance in kilometres.

    Fractions are truncated; invalid, non-finite or negative input becomes 0.
    """
    return int(parse_amount(raw))


def format_number(value: Number) -> str:
    """
    Render a number in its shortest plain form.

    Whole values drop the decimal part, everything else uses the shortest
    representation that round-trips.

    Examples:
        >>> format_number(50.0)
        '50'
        >>> format_number(75.5)
        '75.5'
        >>> format_number(33.33)
        '33.33'
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return '0'
    if value == int(value):
        # Also turns -0.0 into '0'
        return str(int(value))
    return repr(value)


def format_money(amount: Number, symbol: str = '€') -> str:
    """
    Format an amount with a currency symbol and two decimals.

    Examples:
        >>> format_money(25)
        '€25.00'
    """
    if amount is None:
        return 'N/A'
    return f"{symbol}{float(amount):.2f}"
