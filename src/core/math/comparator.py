"""
Magnitude Comparator — точное упорядочивание |a| и |b|

Трёхуровневое сравнение строк цифр, без числовой конверсии:

1. Длина целой части (нет ведущих нулей → длиннее значит больше)
2. Цифры целой части лексикографически (равная длина → лексикографический = числовой)
3. Цифры дробной части лексикографически, после дополнения справа до равной длины

Знак игнорируется.
"""

from enum import IntEnum

from src.core.domain.decimal_value import DecimalValue
from src.core.math.digits import align_fractions


class Ordering(IntEnum):
    """Результат трёхстороннего сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _order(a: str, b: str) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_abs(a: DecimalValue, b: DecimalValue) -> Ordering:
    """
    Сравнение модулей |a| и |b|.

    Args:
        a: Первый операнд (знак игнорируется)
        b: Второй операнд (знак игнорируется)

    Returns:
        Ordering.LESS, Ordering.EQUAL или Ordering.GREATER

    Examples:
        >>> compare_abs(parse_decimal("-10"), parse_decimal("9.99"))
        <Ordering.GREATER: 1>
        >>> compare_abs(parse_decimal("0.5"), parse_decimal("-0.50"))
        <Ordering.EQUAL: 0>
    """
    if len(a.int_part) != len(b.int_part):
        return Ordering.LESS if len(a.int_part) < len(b.int_part) else Ordering.GREATER

    int_order = _order(a.int_part, b.int_part)
    if int_order is not Ordering.EQUAL:
        return int_order

    frac_a, frac_b = align_fractions(a.frac_part, b.frac_part)
    return _order(frac_a, frac_b)
