"""
Core Package

The Money value type and the integer cent utilities behind it.

This package provides:
- Money, an immutable dollar amount backed by a single count of cents
- Parsing and formatting of dollar strings with integer arithmetic only
- The error taxonomy for malformed input and out-of-range amounts
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    MAX_CENTS,
    MIN_CENTS,
    MoneyOverflowError,
    ParseError,
    ParseErrorKind,
    cents_to_dollars_str,
    check_cents_range,
    format_cents,
    parse_dollars_to_cents,
    truncating_divide,
)
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "MAX_CENTS",
    "MIN_CENTS",
    "Money",
    "MoneyOverflowError",
    # Errors
    "ParseError",
    "ParseErrorKind",
    # Currency utilities
    "cents_to_dollars_str",
    "check_cents_range",
    "format_cents",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "parse_dollars_to_cents",
    "reload_config",
    "truncating_divide",
]
