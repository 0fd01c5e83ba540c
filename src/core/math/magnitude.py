"""
Magnitude Arithmetic — сложение и вычитание модулей "в столбик"

Обе операции:
1. Выравнивают дробные части (справа) и целые части (слева)
2. Проходят разряды от младшего к старшему: сначала дробь, затем целая часть,
   перенос/заём распространяется влево через десятичную точку
3. Ре-нормализуют сырые цифры (ведущие/хвостовые нули, канонический ноль)

Результат всегда POSITIVE; итоговый знак ставит signed adder.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add_abs не теряет перенос: перенос из старшего разряда добавляет цифру
2. sub_abs требует |a| >= |b|, иначе PreconditionViolation
3. Никакой конверсии операндов в float или int, только отдельные цифры
"""

from src.core.domain.decimal_value import DecimalValue, Sign
from src.core.math.comparator import Ordering, compare_abs
from src.core.math.digits import (
    PreconditionViolation,
    align_fractions,
    align_integers,
    trim_leading_zeros,
    trim_trailing_zeros,
)

# =============================================================================
# HELPERS
# =============================================================================


def _aligned_digits(a: DecimalValue, b: DecimalValue) -> tuple[str, str, int]:
    """
    Выравнивание обоих модулей в строки равной длины с неявной точкой.

    Returns:
        (digits_a, digits_b, frac_width), последние frac_width цифр каждой
        строки — дробная часть
    """
    frac_a, frac_b = align_fractions(a.frac_part, b.frac_part)
    int_a, int_b = align_integers(a.int_part, b.int_part)
    return int_a + frac_a, int_b + frac_b, len(frac_a)


def _normalized(digits: str, frac_width: int) -> DecimalValue:
    """Разрез сырых цифр по неявной точке и удаление незначащих нулей."""
    split = len(digits) - frac_width
    int_part = trim_leading_zeros(digits[:split])
    frac_part = trim_trailing_zeros(digits[split:])
    return DecimalValue(int_part=int_part, frac_part=frac_part, sign=Sign.POSITIVE)


# =============================================================================
# ОПЕРАЦИИ НАД МОДУЛЯМИ
# =============================================================================


def add_abs(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Точная сумма модулей |a| + |b|.

    Args:
        a: Первый операнд (знак игнорируется)
        b: Второй операнд (знак игнорируется)

    Returns:
        POSITIVE DecimalValue, равный |a| + |b|

    Examples:
        >>> format_decimal(add_abs(parse_decimal("99.95"), parse_decimal("-0.05")))
        '100'
    """
    digits_a, digits_b, frac_width = _aligned_digits(a, b)

    result: list[str] = []
    carry = 0
    for da, db in zip(reversed(digits_a), reversed(digits_b)):
        total = int(da) + int(db) + carry
        result.append(str(total % 10))
        carry = total // 10
    if carry:
        result.append(str(carry))

    return _normalized("".join(reversed(result)), frac_width)


def sub_abs(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Точная разность модулей |a| - |b|, требует |a| >= |b|.

    Args:
        a: Уменьшаемое (знак игнорируется), больший или равный модуль
        b: Вычитаемое (знак игнорируется)

    Returns:
        POSITIVE DecimalValue, равный |a| - |b| (канонический ноль при равенстве)

    Raises:
        PreconditionViolation: Если |a| < |b|

    Examples:
        >>> format_decimal(sub_abs(parse_decimal("1.005"), parse_decimal("1")))
        '0.005'
    """
    if compare_abs(a, b) is Ordering.LESS:
        raise PreconditionViolation(
            f"sub_abs requires |a| >= |b|: "
            f"|a|={a.int_part}.{a.frac_part or '0'} < |b|={b.int_part}.{b.frac_part or '0'}"
        )

    digits_a, digits_b, frac_width = _aligned_digits(a, b)

    result: list[str] = []
    borrow = 0
    for da, db in zip(reversed(digits_a), reversed(digits_b)):
        diff = int(da) - borrow - int(db)
        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0
        result.append(str(diff))

    return _normalized("".join(reversed(result)), frac_width)
