"""
Parser — текст литерала → нормализованный DecimalValue

Преобразует валидный литерал в каноническое значение:

    "+0001.0"   → ( +, "1", ""    )
    "-0001.005" → ( -, "1", "005" )
    "-000.000"  → ( +, "0", ""    )   канонический ноль теряет знак
"""

from src.core.domain.decimal_value import DecimalValue, Sign
from src.core.math.digits import trim_leading_zeros, trim_trailing_zeros
from src.core.math.literal import require_valid_literal


def parse_decimal(text: str) -> DecimalValue:
    """
    Разбор десятичного литерала в нормализованный DecimalValue.

    Литерал валидируется повторно: вызывающий код, пропустивший
    is_valid_literal(), получает исключение, а не испорченное значение.

    Args:
        text: Токен, удовлетворяющий is_valid_literal()

    Returns:
        Нормализованный DecimalValue (без ведущих/хвостовых нулей, без -0)

    Raises:
        InvalidLiteral: Если text не является валидным литералом

    Examples:
        >>> parse_decimal("+0001.0")
        DecimalValue(int_part='1', frac_part='', sign=<Sign.POSITIVE: '+'>)
    """
    literal = require_valid_literal(text)

    sign = Sign.POSITIVE
    if literal[0] in "+-":
        if literal[0] == "-":
            sign = Sign.NEGATIVE
        literal = literal[1:]

    int_part, _, frac_part = literal.partition(".")

    int_part = trim_leading_zeros(int_part)
    frac_part = trim_trailing_zeros(frac_part)

    if int_part == "0" and not frac_part:
        sign = Sign.POSITIVE

    return DecimalValue(int_part=int_part, frac_part=frac_part, sign=sign)
