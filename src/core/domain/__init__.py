"""
Доменные модели и value objects.

Содержит нормализованный sign-magnitude DecimalValue.
"""

from src.core.domain.decimal_value import (
    FRAC_PART_PATTERN,
    INT_PART_PATTERN,
    ZERO,
    DecimalValue,
    Sign,
)

__all__ = [
    # Patterns
    "INT_PART_PATTERN",
    "FRAC_PART_PATTERN",
    # Decimal value model
    "DecimalValue",
    "Sign",
    "ZERO",
]
