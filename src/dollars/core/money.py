#!/usr/bin/env python3
"""
Money Primitive Type

Immutable US dollar value that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from typing import Any

from .currency import (
    CENTS_PER_DOLLAR,
    check_cents_range,
    format_cents,
    parse_dollars_to_cents,
    truncating_divide,
)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Supports both positive and negative amounts. The total cent count is the
    only stored state; the dollar and cent components are derived from it.
    Every operation that would leave the 64-bit cent range raises
    MoneyOverflowError.

    Examples:
        >>> price = Money.parse("$5.5")
        >>> price.total_cents()
        550
        >>> refund = Money.from_cents(-150)
        >>> str(refund)
        '-$1.50'
        >>> refund.dollars(), refund.cents()
        (-1, 50)
        >>> str(price + refund)
        '$4.00'
    """

    amount_cents: int

    def __post_init__(self) -> None:
        if not _is_scalar(self.amount_cents):
            raise TypeError(f"Money requires integer cents, got {type(self.amount_cents).__name__}")
        check_cents_range(self.amount_cents)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from a total number of cents."""
        return cls(amount_cents=cents)

    @classmethod
    def zero(cls) -> "Money":
        """Return $0.00."""
        return cls(amount_cents=0)

    @classmethod
    def parse(cls, text: str) -> "Money":
        """
        Parse from a dollar string like "$123.45", "-5" or "+$0.5".

        Args:
            text: Amount with optional sign, optional "$" and at most two
                fractional digits

        Returns:
            Money object

        Raises:
            ParseError: If the text is not a valid dollar amount
        """
        return cls(amount_cents=parse_dollars_to_cents(text))

    def dollars(self) -> int:
        """Whole dollars, truncated toward zero (-150 cents is -1)."""
        return truncating_divide(self.amount_cents, CENTS_PER_DOLLAR)

    def cents(self) -> int:
        """
        Sub-dollar cents, always in 0-99.

        Note the difference between this method and total_cents().
        """
        return abs(self.amount_cents) % CENTS_PER_DOLLAR

    def total_cents(self) -> int:
        """Get the whole value in cents."""
        return self.amount_cents

    def is_positive(self) -> bool:
        return self.amount_cents > 0

    def is_negative(self) -> bool:
        return self.amount_cents < 0

    def is_zero(self) -> bool:
        return self.amount_cents == 0

    def add(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(amount_cents=self.amount_cents + _cents_of(other))

    def subtract(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(amount_cents=self.amount_cents - _cents_of(other))

    def negate(self) -> "Money":
        return Money(amount_cents=-self.amount_cents)

    def abs(self) -> "Money":
        """
        Return absolute value of Money.

        Useful for display purposes when sign doesn't matter.
        """
        return Money(amount_cents=abs(self.amount_cents))

    def multiply(self, scalar: int) -> "Money":
        """Multiply Money by an integer scalar."""
        if not _is_scalar(scalar):
            raise TypeError(f"Money can only be multiplied by an int, not {type(scalar).__name__}")
        return Money(amount_cents=self.amount_cents * scalar)

    def divide(self, scalar: int) -> "Money":
        """
        Divide Money by an integer scalar, truncating toward zero.

        Raises:
            ZeroDivisionError: If scalar is 0
        """
        if not _is_scalar(scalar):
            raise TypeError(f"Money can only be divided by an int, not {type(scalar).__name__}")
        if scalar == 0:
            raise ZeroDivisionError("Money division by zero")
        return Money(amount_cents=truncating_divide(self.amount_cents, scalar))

    def to_string(self) -> str:
        """Get canonical dollar string, e.g. "-$1.50"."""
        return format_cents(self.amount_cents)

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: object) -> "Money":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.multiply(scalar)  # type: ignore[arg-type]

    __rmul__ = __mul__

    def __floordiv__(self, scalar: object) -> "Money":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.divide(scalar)  # type: ignore[arg-type]

    def __neg__(self) -> "Money":
        return self.negate()

    def __pos__(self) -> "Money":
        return self

    def __abs__(self) -> "Money":
        return self.abs()

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount_cents == other.amount_cents

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount_cents < other.amount_cents

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount_cents <= other.amount_cents

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount_cents > other.amount_cents

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount_cents >= other.amount_cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        # Width and alignment apply to the canonical string.
        return format(self.to_string(), format_spec)


def _cents_of(other: object) -> int:
    if not isinstance(other, Money):
        raise TypeError(f"expected Money, got {type(other).__name__}")
    return other.amount_cents
