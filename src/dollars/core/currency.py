#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Integer-only helpers behind the Money type. Every amount is a count of cents
held in a plain int, restricted to the range of a 64-bit signed integer.

Currency Systems:
- Internal values use cents: 100 cents = $1.00
- Display uses dollar strings: "$12.34", "-$0.05"

Key Principles:
- Never use floating-point arithmetic for currency
- Fail loudly: malformed input raises ParseError, out-of-range results raise
  MoneyOverflowError, nothing is silently defaulted, wrapped or rounded
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

MIN_CENTS = -(2**63)
MAX_CENTS = 2**63 - 1

CENTS_PER_DOLLAR = 100

_DIGITS = frozenset("0123456789")
# Longest dollar part (ignoring leading zeros) that can still fit MAX_CENTS.
_MAX_DOLLAR_DIGITS = len(str(MAX_CENTS // CENTS_PER_DOLLAR))


class ParseErrorKind(Enum):
    """Reasons a dollar string can be rejected."""

    EMPTY = "input is empty"
    NON_ASCII = "non-ASCII strings are not allowed"
    NO_DIGITS = "no dollar digits"
    INVALID_CHARACTER = "invalid character"
    BAD_CENTS_LENGTH = "cents must be one or two digits long"
    EXTRA_DECIMAL_POINT = "too many decimal points"
    OVERFLOW = "value overflows"


class ParseError(ValueError):
    """
    Failure to parse a dollar amount from a string.

    Attributes:
        kind: Which rule the input broke
        text: The rejected input, as given
        char: The offending character for INVALID_CHARACTER, else None
    """

    def __init__(self, kind: ParseErrorKind, text: str, char: str | None = None):
        self.kind = kind
        self.text = text
        self.char = char
        super().__init__(f"failed to parse dollars: {self.reason}")

    @property
    def reason(self) -> str:
        if self.char is not None:
            return f"{self.kind.value} {self.char!r} in {self.text!r}"
        return f"{self.kind.value}: {self.text!r}"


class MoneyOverflowError(OverflowError):
    """Raised when an amount falls outside the representable range of cents."""


def check_cents_range(cents: int) -> int:
    """
    Ensure a cent count fits in the representable range.

    Args:
        cents: Amount in cents

    Returns:
        The same amount, unchanged

    Raises:
        MoneyOverflowError: If cents is below MIN_CENTS or above MAX_CENTS
    """
    if not MIN_CENTS <= cents <= MAX_CENTS:
        raise MoneyOverflowError(f"{cents} cents is outside [{MIN_CENTS}, {MAX_CENTS}]")
    return cents


def truncating_divide(numerator: int, denominator: int) -> int:
    """
    Integer division rounding toward zero.

    Python's // floors, so -150 // 100 is -2; this returns -1 instead.

    Example:
        truncating_divide(-101, 2) -> -50
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse a dollar string to cents using integer arithmetic only.

    Accepts an optional sign, an optional "$", one or more dollar digits and
    optionally a decimal point followed by one or two cent digits. A single
    cent digit means tenths of a dollar. Surrounding whitespace is ignored.

    Args:
        dollars_str: String representation of a dollar amount

    Returns:
        Amount in cents

    Raises:
        ParseError: If the string is not a valid dollar amount

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("-$12.34") -> -1234
        parse_dollars_to_cents("+12") -> 1200
        parse_dollars_to_cents("12.5") -> 1250
    """
    text = dollars_str.strip()
    try:
        return _parse(text)
    except ParseError as e:
        logger.debug("Rejected dollar amount %r: %s", dollars_str, e.reason)
        raise


def _parse(text: str) -> int:
    if not text:
        raise ParseError(ParseErrorKind.EMPTY, text)
    if not text.isascii():
        raise ParseError(ParseErrorKind.NON_ASCII, text)

    rest = text
    sign = 1
    if rest[0] in "+-":
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest.startswith("$"):
        rest = rest[1:]

    whole, point, fraction = rest.partition(".")
    if "." in fraction:
        raise ParseError(ParseErrorKind.EXTRA_DECIMAL_POINT, text)
    if not whole:
        raise ParseError(ParseErrorKind.NO_DIGITS, text)
    _require_digits(whole, text)

    cents = 0
    if point:
        if len(fraction) not in (1, 2):
            raise ParseError(ParseErrorKind.BAD_CENTS_LENGTH, text)
        _require_digits(fraction, text)
        cents = int(fraction.ljust(2, "0"))

    significant = whole.lstrip("0")
    if len(significant) > _MAX_DOLLAR_DIGITS:
        raise ParseError(ParseErrorKind.OVERFLOW, text)

    total = sign * (int(significant or "0") * CENTS_PER_DOLLAR + cents)
    if not MIN_CENTS <= total <= MAX_CENTS:
        raise ParseError(ParseErrorKind.OVERFLOW, text)
    return total


def _require_digits(part: str, text: str) -> None:
    for char in part:
        if char not in _DIGITS:
            raise ParseError(ParseErrorKind.INVALID_CHARACTER, text, char)


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string, without the "$"

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-5) -> "-0.05"
    """
    abs_cents = abs(cents)
    dollars, remainder = divmod(abs_cents, CENTS_PER_DOLLAR)
    sign = "-" if cents < 0 else ""
    return f"{sign}{dollars}.{remainder:02d}"


def format_cents(cents: int) -> str:
    """Format cents as a canonical dollar string, e.g. "-$1.50"."""
    if cents < 0:
        return f"-${cents_to_dollars_str(-cents)}"
    return f"${cents_to_dollars_str(cents)}"
