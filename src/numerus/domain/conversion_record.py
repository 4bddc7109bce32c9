"""
ConversionRecord — Сериализуемая запись одной конверсии

Immutable Pydantic модель, описывающая значение во всех представлениях:
numeral, (int_part, twelfths), float, текст дроби, overline.
Полная совместимость с JSON Schema (contracts/schema/conversion_record.json).
"""

from pydantic import BaseModel, Field, field_validator

from src.numerus.codec.encoder import fraction_to_numeral
from src.numerus.codec.analysis import is_extended
from src.numerus.codec.formatting import fraction_text, overline_numeral
from src.numerus.domain.constants import (
    EXTENDED_INT_MAX,
    EXTENDED_INT_MIN,
    EXTENDED_MAX,
    EXTENDED_MIN,
    MAX_EXTENDED_LENGTH,
    MAX_TWELFTHS,
)
from src.numerus.domain.fraction import Fraction
from src.numerus.math.twelfths import fraction_to_double, simplify


class ConversionRecord(BaseModel):
    """
    Запись конверсии значения.

    Immutable модель (frozen=True). Строится только из канонической дроби,
    поэтому все поля согласованы между собой.
    """

    numeral: str = Field(
        ...,
        min_length=1,
        max_length=MAX_EXTENDED_LENGTH - 1,
        pattern=r"^(-?NULLA|-?(_[MDCLXVI]+_)?[MDCLXVI]*S?\.{0,5})$",
        description="Канонический numeral",
    )
    int_part: int = Field(
        ..., ge=EXTENDED_INT_MIN, le=EXTENDED_INT_MAX, description="Целая часть"
    )
    twelfths: int = Field(
        ..., ge=-MAX_TWELFTHS, le=MAX_TWELFTHS, description="Двенадцатые, знак как у int_part"
    )
    value: float = Field(..., ge=EXTENDED_MIN, le=EXTENDED_MAX, description="Значение как float")
    fraction_text: str = Field(..., min_length=1, description="Текст дроби, например '1, 1/6'")
    overlined: str = Field(..., min_length=1, description="Overline-представление (LF)")
    is_extended: bool = Field(..., description="Использует vinculum или двенадцатые")

    model_config = {"frozen": True}

    @field_validator("twelfths")
    @classmethod
    def validate_same_sign(cls, v: int, info) -> int:
        """Проверка, что twelfths и int_part не имеют противоположных знаков"""
        if "int_part" in info.data:
            int_part = info.data["int_part"]
            if int_part > 0 > v or int_part < 0 < v:
                raise ValueError(
                    f"twelfths {v} must share sign with int_part {int_part}"
                )
        return v

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.int_part, self.twelfths)

    @classmethod
    def from_fraction(cls, fraction: Fraction | tuple[int, int]) -> "ConversionRecord":
        """
        Построение записи из дроби (допускается неканоническая).

        Raises:
            NumerusError: NULL_FRACTION, VALUE_OUT_OF_RANGE
        """
        canonical = simplify(fraction)
        numeral = fraction_to_numeral(canonical)
        return cls(
            numeral=numeral,
            int_part=canonical.int_part,
            twelfths=canonical.twelfths,
            value=fraction_to_double(canonical),
            fraction_text=fraction_text(canonical),
            overlined=overline_numeral(numeral),
            is_extended=is_extended(numeral),
        )
