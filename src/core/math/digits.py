"""
Digit Primitives — строковые примитивы десятичной арифметики

Общие строительные блоки для parser, comparator и magnitude-арифметики.
Все функции работают с обычными строками цифр (старший разряд первым) и
никогда не конвертируют операнды в int или float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы не мутируются (str immutable, результат всегда новая строка)
2. Выравнивание дробной части дополняет СПРАВА, целой части СЛЕВА
3. trim_leading_zeros для непустой строки никогда не возвращает ""
4. trim_trailing_zeros может вернуть "" (каноническое состояние "нет дроби")
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Только ASCII-цифры; str.isdigit() принимает также "²" и "٣"
DIGITS: Final[str] = "0123456789"

# Символ дополнения при выравнивании
ZERO_DIGIT: Final[str] = "0"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PreconditionViolation(Exception):
    """
    Операция ядра вызвана с аргументами, нарушающими её контракт.

    Это ошибка программирования, а не восстановимое runtime-состояние:
    - parse_decimal() вызван на тексте, не являющемся валидным литералом
    - sub_abs(a, b) вызван при |a| < |b|

    Публичная цепочка (is_valid_literal → parse_decimal → add_signed)
    никогда не приводит к этому исключению при вызове в этом порядке.
    """

    pass


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_all_digits(s: str) -> bool:
    """
    Проверка, что строка непустая и состоит только из ASCII-цифр.

    Examples:
        >>> is_all_digits("0042")
        True
        >>> is_all_digits("")
        False
        >>> is_all_digits("4a")
        False
    """
    if not s:
        return False
    return all(c in DIGITS for c in s)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim_leading_zeros(s: str) -> str:
    """
    Удаление ведущих нулей целой части с сохранением минимум одной цифры.

    Args:
        s: Цифры целой части (могут содержать ведущие нули)

    Returns:
        Цифры без ведущих нулей; "0" если все цифры были нулями

    Examples:
        >>> trim_leading_zeros("0001")
        '1'
        >>> trim_leading_zeros("0000")
        '0'
        >>> trim_leading_zeros("10")
        '10'
    """
    stripped = s.lstrip(ZERO_DIGIT)
    if not stripped:
        return ZERO_DIGIT if s else s
    return stripped


def trim_trailing_zeros(s: str) -> str:
    """
    Удаление хвостовых нулей дробной части.

    Examples:
        >>> trim_trailing_zeros("500")
        '5'
        >>> trim_trailing_zeros("000")
        ''
    """
    return s.rstrip(ZERO_DIGIT)


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================


def align_fractions(a: str, b: str) -> tuple[str, str]:
    """
    Дополнение двух дробных частей нулями справа до равной длины.

    Нули справа не меняют значение дроби, поэтому выровненные строки
    сравниваются и складываются поразрядно с одинаковыми весами.
    Результат — рабочая копия, обратно в значение он не записывается.

    Args:
        a: Дробные цифры первого операнда ("" если дроби нет)
        b: Дробные цифры второго операнда ("" если дроби нет)

    Returns:
        (a_padded, b_padded), len(a_padded) == len(b_padded)

    Examples:
        >>> align_fractions("5", "125")
        ('500', '125')
        >>> align_fractions("", "3")
        ('0', '3')
    """
    width = max(len(a), len(b))
    return a.ljust(width, ZERO_DIGIT), b.ljust(width, ZERO_DIGIT)


def align_integers(a: str, b: str) -> tuple[str, str]:
    """
    Дополнение двух целых частей нулями слева до равной длины.

    Examples:
        >>> align_integers("7", "123")
        ('007', '123')
    """
    width = max(len(a), len(b))
    return a.rjust(width, ZERO_DIGIT), b.rjust(width, ZERO_DIGIT)
