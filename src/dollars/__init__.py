"""
Dollars - Fixed-Point US Dollar Amounts

An immutable money type backed by a single signed integer count of cents,
with strict parsing of human-entered amounts and canonical formatting.

Example Usage:
    from dollars import Money

    total = Money.parse("$5.5") + Money.from_cents(-150)
    print(total)  # $4.00

Version: 0.1.0
"""

__version__ = "0.1.0"

from .core.currency import (
    MAX_CENTS,
    MIN_CENTS,
    MoneyOverflowError,
    ParseError,
    ParseErrorKind,
    format_cents,
    parse_dollars_to_cents,
)
from .core.money import Money

__all__ = [
    "MAX_CENTS",
    "MIN_CENTS",
    "Money",
    "MoneyOverflowError",
    "ParseError",
    "ParseErrorKind",
    "format_cents",
    "parse_dollars_to_cents",
]
