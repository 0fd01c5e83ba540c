"""
DecimalValue — нормализованное sign-magnitude десятичное число

Immutable Pydantic модель, хранящая десятичное число произвольной точности
в виде строк цифр. Каждое числовое значение имеет ровно одно представление:

    value = sign × int_part.frac_part

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. int_part никогда не пустой и не имеет ведущего нуля, кроме ровно "0"
2. frac_part никогда не заканчивается на "0" ("" означает отсутствие дроби)
3. Канонический ноль (int_part="0", frac_part="") всегда POSITIVE
4. Каждая цифра — ASCII-символ '0'..'9'

Экземпляры создаются parser'ом или арифметикой; попытка построить значение,
нарушающее инвариант, приводит к pydantic.ValidationError.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак десятичного значения"""

    POSITIVE = "+"
    NEGATIVE = "-"


# =============================================================================
# ШАБЛОНЫ ЦИФР
# =============================================================================

# "0" или непустая последовательность цифр без ведущего нуля
INT_PART_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"

# Пусто, или последовательность цифр с ненулевой последней цифрой
FRAC_PART_PATTERN: Final[str] = r"^([0-9]*[1-9])?$"


# =============================================================================
# DECIMAL VALUE MODEL
# =============================================================================


class DecimalValue(BaseModel):
    """
    Нормализованное десятичное значение в sign-magnitude форме.

    Immutable модель (frozen=True): арифметика всегда возвращает новые экземпляры.
    Равенство и хеш сравнивают (int_part, frac_part, sign), что совпадает с
    точным числовым равенством, так как представление каноническое.
    """

    int_part: str = Field(
        ..., pattern=INT_PART_PATTERN, description="Цифры целой части без ведущих нулей"
    )
    frac_part: str = Field(
        "", pattern=FRAC_PART_PATTERN, description="Цифры дробной части без хвостовых нулей"
    )
    sign: Sign = Field(Sign.POSITIVE, description="Знак (ноль всегда положительный)")

    model_config = {"frozen": True}

    @field_validator("sign")
    @classmethod
    def validate_no_negative_zero(cls, v: Sign, info) -> Sign:
        """Канонический ноль не имеет знака: -0 отклоняется"""
        if (
            v is Sign.NEGATIVE
            and info.data.get("int_part") == "0"
            and info.data.get("frac_part") == ""
        ):
            raise ValueError("negative zero is not a canonical decimal value")
        return v

    @classmethod
    def zero(cls) -> "DecimalValue":
        """Канонический ноль: POSITIVE, "0", без дроби."""
        return cls(int_part="0", frac_part="", sign=Sign.POSITIVE)

    def is_zero(self) -> bool:
        return self.int_part == "0" and not self.frac_part

    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def with_sign(self, sign: Sign) -> "DecimalValue":
        """
        Копия значения с другим знаком.

        Нулевой модуль всегда возвращается POSITIVE, поэтому вызывающий код,
        применяющий знак результата, никогда не получит отрицательный ноль.

        Args:
            sign: Запрошенный знак

        Returns:
            Новый DecimalValue с теми же цифрами
        """
        if self.is_zero():
            sign = Sign.POSITIVE
        if sign is self.sign:
            return self
        return DecimalValue(int_part=self.int_part, frac_part=self.frac_part, sign=sign)


# Singleton канонического нуля
ZERO: Final[DecimalValue] = DecimalValue.zero()
