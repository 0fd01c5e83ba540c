"""
Formatter — DecimalValue → канонический текст

Результат всегда проходит is_valid_literal() и никогда не содержит "+".
"""

from src.core.domain.decimal_value import DecimalValue


def format_decimal(value: DecimalValue) -> str:
    """
    Отображение DecimalValue в канонический текст.

    Examples:
        >>> format_decimal(parse_decimal("-0001.0050"))
        '-1.005'
        >>> format_decimal(parse_decimal("-0.0"))
        '0'
    """
    if value.is_zero():
        return "0"

    text = value.int_part
    if value.frac_part:
        text = f"{text}.{value.frac_part}"
    if value.is_negative():
        text = f"-{text}"
    return text
