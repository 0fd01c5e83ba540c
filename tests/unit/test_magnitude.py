"""
Тесты арифметики модулей (add_abs / sub_abs)

Проверяет:
1. Перенос через десятичную точку и из старшего разряда
2. Заём через десятичную точку
3. Ре-нормализация результатов
4. Результаты всегда положительные
5. Предусловие sub_abs |a| >= |b|
"""

import pytest

from src.core.domain import ZERO, Sign
from src.core.math import PreconditionViolation, add_abs, format_decimal, parse_decimal, sub_abs


def _add(a: str, b: str) -> str:
    return format_decimal(add_abs(parse_decimal(a), parse_decimal(b)))


def _sub(a: str, b: str) -> str:
    return format_decimal(sub_abs(parse_decimal(a), parse_decimal(b)))


# =============================================================================
# ADD ABS
# =============================================================================


class TestAddAbs:
    """Тесты add_abs"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1", "2", "3"),
            ("0.1", "0.2", "0.3"),
            ("0.5", "0.5", "1"),
            ("99.95", "0.05", "100"),
            ("999", "1", "1000"),
            ("9.999", "0.001", "10"),
            ("1.25", "10", "11.25"),
            ("0.001", "0.0009", "0.0019"),
        ],
    )
    def test_sums(self, a: str, b: str, expected: str) -> None:
        assert _add(a, b) == expected

    def test_signs_ignored_and_result_positive(self) -> None:
        result = add_abs(parse_decimal("-1.5"), parse_decimal("-2.5"))
        assert result.sign is Sign.POSITIVE
        assert format_decimal(result) == "4"

    def test_carry_grows_integer(self) -> None:
        """Перенос из старшего разряда добавляет цифру"""
        assert _add("9" * 30, "1") == "1" + "0" * 30

    def test_zero_operands(self) -> None:
        assert add_abs(ZERO, ZERO) == ZERO
        assert _add("0", "-3.5") == "3.5"


# =============================================================================
# SUB ABS
# =============================================================================


class TestSubAbs:
    """Тесты sub_abs"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("3", "2", "1"),
            ("1.005", "1", "0.005"),
            ("1", "0.001", "0.999"),
            ("100", "0.01", "99.99"),
            ("1000", "1", "999"),
            ("10.5", "0.5", "10"),
            ("5.25", "5.2", "0.05"),
            ("1.1", "0.11", "0.99"),
        ],
    )
    def test_differences(self, a: str, b: str, expected: str) -> None:
        assert _sub(a, b) == expected

    def test_equal_magnitudes_give_canonical_zero(self) -> None:
        result = sub_abs(parse_decimal("-12.340"), parse_decimal("12.34"))
        assert result == ZERO

    def test_result_positive(self) -> None:
        result = sub_abs(parse_decimal("-10"), parse_decimal("-4"))
        assert result.sign is Sign.POSITIVE
        assert format_decimal(result) == "6"

    def test_borrow_chain_across_point(self) -> None:
        """Заём распространяется из дроби через все цифры целой части"""
        assert _sub("1" + "0" * 20, "0." + "0" * 19 + "1") == "9" * 20 + "." + "9" * 19 + "9"

    def test_precondition_violation(self) -> None:
        """|a| < |b| — ошибка программирования"""
        with pytest.raises(PreconditionViolation, match="requires"):
            sub_abs(parse_decimal("1"), parse_decimal("1.0001"))
