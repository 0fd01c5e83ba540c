"""
Literal Validator — грамматика знакового десятичного литерала

Распознаёт токены вида:

    [+|-] DIGIT+ [ "." DIGIT+ ]

Допустимые примеры: "1", "1.0", "+1.0", "+0001.0", "-0001.005"
Недопустимые примеры: "A", "+-1", "-5.", "-.5", "-5.-5", "", "+", "1..2"

Цифра ОБЯЗАТЕЛЬНА с обеих сторон точки: ".5" и "5." отклоняются,
в отличие от грамматик float большинства языков программирования.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_valid_literal тотальна: для любого входа возвращает bool, не бросает
2. Цифрами считаются только ASCII 0-9 (никаких Unicode-классов цифр)
3. Нет экспоненты, пробелов и разделителей разрядов
"""

import re
from typing import Final

from src.core.math.digits import PreconditionViolation

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# [0-9] вместо \d: \d совпадает с любой Unicode-цифрой
LITERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidLiteral(PreconditionViolation, ValueError):
    """
    Токен не является валидным знаковым десятичным литералом.

    Бросается parse_decimal() при вызове без предварительной валидации.
    Драйвер должен сначала вызвать is_valid_literal() и сообщить о
    невалидном токене, а не перехватывать это исключение.
    """

    def __init__(self, token: object):
        self.token = token
        super().__init__(f"{token!r} is not a valid decimal literal")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_literal(text: object) -> bool:
    """
    Проверка синтаксической валидности знакового десятичного литерала.

    Args:
        text: Токен-кандидат (не-str объекты просто отклоняются)

    Returns:
        True если весь токен соответствует грамматике литерала

    Examples:
        >>> is_valid_literal("+0001.0")
        True
        >>> is_valid_literal("-.5")
        False
        >>> is_valid_literal("5.")
        False
        >>> is_valid_literal(None)
        False
    """
    if not isinstance(text, str):
        return False
    return LITERAL_PATTERN.fullmatch(text) is not None


def require_valid_literal(text: object) -> str:
    """
    Возвращает токен без изменений, если он валиден, иначе InvalidLiteral.

    Raises:
        InvalidLiteral: Если is_valid_literal(text) == False
    """
    if not is_valid_literal(text):
        raise InvalidLiteral(text)
    return text  # type: ignore[return-value]
