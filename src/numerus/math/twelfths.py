"""
Twelfths — Алгебра дробей в двенадцатых

Модуль обеспечивает операции над представлением (int_part, twelfths):
- Упрощение до канонической формы (simplify)
- Конверсия Fraction → IEEE-754 double
- Конверсия double → Fraction с округлением до ближайшей двенадцатой

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. simplify сохраняет рациональное значение точно
2. simplify идемпотентна: simplify(simplify(f)) == simplify(f)
3. Целочисленное деление и остаток усекают к нулю (не floor)
4. Округление двенадцатых: half away from zero (не banker's rounding)
5. NaN/Inf никогда не превращаются в Fraction

ФОРМУЛЫ:
    int_part += trunc(twelfths / 12)
    twelfths  = twelfths - trunc(twelfths / 12) * 12
    если int_part > 0 и twelfths < 0: int_part -= 1, twelfths += 12
    если int_part < 0 и twelfths > 0: int_part += 1, twelfths -= 12
"""

import math

from src.numerus.domain.constants import (
    EXTENDED_INT_MAX,
    EXTENDED_MAX,
    EXTENDED_MIN,
    INT32_MAX,
    INT32_MIN,
    MAX_TWELFTHS,
    TWELFTHS_PER_UNIT,
)
from src.numerus.domain.errors import ErrorCode, NumerusError
from src.numerus.domain.fraction import Fraction


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Деление с усечением к нулю (семантика C), в отличие от divmod().

    Остаток имеет знак делимого.

    Examples:
        >>> trunc_divmod(-59, 12)
        (-4, -11)
        >>> divmod(-59, 12)
        (-5, 1)
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def round_half_away(value: float) -> int:
    """
    Округление до ближайшего целого, половина от нуля.

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
        >>> round(2.5)  # banker's rounding
        2
    """
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def check_int32(value: int, name: str) -> None:
    """
    Проверка, что поле является int и помещается в знаковые 32 бита.

    Raises:
        NumerusError: VALUE_OUT_OF_RANGE для bool, float и прочих не-int,
            а также для значений вне int32
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise NumerusError(
            ErrorCode.VALUE_OUT_OF_RANGE,
            f"{name}={value!r} is not an integer",
        )
    if value < INT32_MIN or value > INT32_MAX:
        raise NumerusError(
            ErrorCode.VALUE_OUT_OF_RANGE, f"{name}={value} does not fit in 32 bits"
        )


def _coerce_fraction(fraction: Fraction | tuple[int, int] | None) -> Fraction:
    if fraction is None:
        raise NumerusError(ErrorCode.NULL_FRACTION)
    int_part, twelfths = fraction
    if int_part is None or twelfths is None:
        raise NumerusError(ErrorCode.NULL_FRACTION)
    check_int32(int_part, "int_part")
    check_int32(twelfths, "twelfths")
    return Fraction(int_part, twelfths)


# =============================================================================
# SIMPLIFY
# =============================================================================


def simplify(fraction: Fraction | tuple[int, int] | None) -> Fraction:
    """
    Приведение дроби к канонической форме.

    Переносит лишние двенадцатые в целую часть, затем выравнивает знаки
    сдвигом ±1 между полями. Рациональное значение сохраняется точно.

    Args:
        fraction: Fraction или пара (int_part, twelfths), возможно неканоническая

    Returns:
        Каноническая Fraction

    Raises:
        NumerusError: NULL_FRACTION если fraction is None
        NumerusError: VALUE_OUT_OF_RANGE если |int_part| > EXTENDED_INT_MAX
            после упрощения

    Examples:
        >>> simplify((10, -59))
        Fraction(int_part=5, twelfths=1)
        >>> simplify((-5, 14))
        Fraction(int_part=-3, twelfths=-10)
    """
    int_part, twelfths = _coerce_fraction(fraction)

    # Шаг 1: |twelfths| <= 11, знаки пока не трогаем
    carry, twelfths = trunc_divmod(twelfths, TWELFTHS_PER_UNIT)
    int_part += carry

    # Шаг 2: одинаковый знак у int_part и twelfths
    if int_part > 0 and twelfths < 0:
        int_part -= 1
        twelfths += TWELFTHS_PER_UNIT
    elif int_part < 0 and twelfths > 0:
        int_part += 1
        twelfths -= TWELFTHS_PER_UNIT

    # Шаг 3: границы; twelfths уже в [-11, +11]
    if abs(int_part) > EXTENDED_INT_MAX:
        raise NumerusError(
            ErrorCode.VALUE_OUT_OF_RANGE,
            f"int_part={int_part} exceeds {EXTENDED_INT_MAX}",
        )
    return Fraction(int_part, twelfths)


def is_canonical(fraction: Fraction | tuple[int, int]) -> bool:
    """Проверка канонической формы без поднятия исключений."""
    int_part, twelfths = fraction
    if abs(twelfths) > MAX_TWELFTHS or abs(int_part) > EXTENDED_INT_MAX:
        return False
    return not (int_part > 0 > twelfths or int_part < 0 < twelfths)


# =============================================================================
# КОНВЕРСИЯ FRACTION <-> DOUBLE
# =============================================================================


def fraction_to_double(fraction: Fraction | tuple[int, int] | None) -> float:
    """
    Конверсия дроби в float: int_part + twelfths / 12.

    Args:
        fraction: Fraction (допускается неканоническая)

    Returns:
        Значение в [EXTENDED_MIN, EXTENDED_MAX]

    Raises:
        NumerusError: NULL_FRACTION если fraction is None
        NumerusError: VALUE_OUT_OF_RANGE если значение вне extended диапазона

    Examples:
        >>> fraction_to_double((1, 6))
        1.5
        >>> fraction_to_double((-19, -11))
        -19.916666666666668
    """
    int_part, twelfths = _coerce_fraction(fraction)
    result = twelfths / TWELFTHS_PER_UNIT + int_part
    if result < EXTENDED_MIN or result > EXTENDED_MAX:
        raise NumerusError(ErrorCode.VALUE_OUT_OF_RANGE, f"value={result!r}")
    return result


def double_to_fraction(real: float | None) -> Fraction:
    """
    Конверсия float в дробь, округлённую до ближайшей двенадцатой.

    int_part = trunc(real), twelfths = round_half_away((real - int_part) * 12),
    затем simplify. Значения с |trunc(real)| == EXTENDED_INT_MAX, дробная
    часть которых округляется до 12/12, стягиваются внутрь диапазона до 11/12.

    Args:
        real: Конечное значение с |trunc(real)| <= EXTENDED_INT_MAX

    Returns:
        Каноническая Fraction

    Raises:
        NumerusError: NULL_DOUBLE если real is None
        NumerusError: NOT_FINITE_DOUBLE если NaN или Inf
        NumerusError: VALUE_OUT_OF_RANGE если вне диапазона

    Examples:
        >>> double_to_fraction(1.5)
        Fraction(int_part=1, twelfths=6)
        >>> double_to_fraction(3_999_999.9999)
        Fraction(int_part=3999999, twelfths=11)
    """
    if real is None:
        raise NumerusError(ErrorCode.NULL_DOUBLE)
    real = float(real)
    if not math.isfinite(real):
        raise NumerusError(ErrorCode.NOT_FINITE_DOUBLE, f"value={real!r}")
    if abs(real) >= EXTENDED_INT_MAX + 1:
        raise NumerusError(ErrorCode.VALUE_OUT_OF_RANGE, f"value={real!r}")

    int_part = math.trunc(real)
    twelfths = round_half_away((real - int_part) * TWELFTHS_PER_UNIT)

    # На границе диапазона округление вверх до 12/12 стягивается к 11/12
    if abs(int_part) == EXTENDED_INT_MAX and abs(twelfths) == TWELFTHS_PER_UNIT:
        twelfths = MAX_TWELFTHS if twelfths > 0 else -MAX_TWELFTHS

    return simplify(Fraction(int_part, twelfths))
