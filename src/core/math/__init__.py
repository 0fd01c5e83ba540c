"""
Core math модули для десятичной арифметики над строками

Точные примитивы произвольной точности над строками цифр: без float и без
конверсии целых операндов в int.
"""

# Digit primitives
from src.core.math.digits import (
    DIGITS,
    PreconditionViolation,
    align_fractions,
    align_integers,
    is_all_digits,
    trim_leading_zeros,
    trim_trailing_zeros,
)

# Literal validation
from src.core.math.literal import (
    LITERAL_PATTERN,
    InvalidLiteral,
    is_valid_literal,
    require_valid_literal,
)

# Parsing and formatting
from src.core.math.parser import parse_decimal
from src.core.math.formatter import format_decimal

# Comparison and arithmetic
from src.core.math.comparator import Ordering, compare_abs
from src.core.math.magnitude import add_abs, sub_abs
from src.core.math.signed import add_signed

__all__ = [
    # Digit primitives — Constants
    "DIGITS",
    # Digit primitives — Functions
    "align_fractions",
    "align_integers",
    "is_all_digits",
    "trim_leading_zeros",
    "trim_trailing_zeros",
    # Exceptions
    "InvalidLiteral",
    "PreconditionViolation",
    # Literal validation
    "LITERAL_PATTERN",
    "is_valid_literal",
    "require_valid_literal",
    # Parsing and formatting
    "format_decimal",
    "parse_decimal",
    # Comparison — Types
    "Ordering",
    # Comparison and arithmetic — Functions
    "add_abs",
    "add_signed",
    "compare_abs",
    "sub_abs",
]
