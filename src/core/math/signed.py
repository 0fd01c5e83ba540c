"""
Signed Adder — точное a + b для sign-magnitude десятичных

Таблица случаев:

    a == 0 или b == 0       → другой операнд без изменений
    sign(a) == sign(b)      → add_abs(a, b), общий знак
    sign(a) != sign(b):
        |a| == |b|          → канонический ноль
        |a| >  |b|          → sub_abs(a, b), знак a
        |a| <  |b|          → sub_abs(b, a), знак b

Любой нулевой модуль выходит POSITIVE (нет отрицательного нуля).
"""

from src.core.domain.decimal_value import ZERO, DecimalValue
from src.core.math.comparator import Ordering, compare_abs
from src.core.math.magnitude import add_abs, sub_abs


def add_signed(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Точная знаковая сумма a + b.

    Args:
        a: Первый операнд
        b: Второй операнд

    Returns:
        Нормализованный DecimalValue, равный a + b

    Examples:
        >>> format_decimal(add_signed(parse_decimal("0.1"), parse_decimal("0.2")))
        '0.3'
        >>> format_decimal(add_signed(parse_decimal("+0001.0"), parse_decimal("-0001.005")))
        '-0.005'
    """
    if a.is_zero():
        return b
    if b.is_zero():
        return a

    if a.sign is b.sign:
        return add_abs(a, b).with_sign(a.sign)

    order = compare_abs(a, b)
    if order is Ordering.EQUAL:
        return ZERO
    if order is Ordering.GREATER:
        return sub_abs(a, b).with_sign(a.sign)
    return sub_abs(b, a).with_sign(b.sign)
