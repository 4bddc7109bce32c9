"""
Formatting — Человекочитаемые представления numeral и дробей

- fmt_overline: двухстрочный numeral, vinculum рисуется чертой сверху
- fmt_fraction: дробь вида "-19, -11/12" с сокращением двенадцатых

Обе функции существуют в двух вариантах: *_into (буфер вызывающего)
и аллоцирующий (новая строка через allocator).
"""

import math
from typing import Final

from src.numerus.codec.buffers import (
    Allocator,
    OutBuffer,
    check_out_buffer,
    clear_cstring,
    default_allocator,
    render_allocated,
    write_cstring,
)
from src.numerus.domain.constants import (
    MAX_FRACTION_TEXT_LENGTH,
    MAX_OVERLINED_LENGTH,
    TWELFTHS_PER_UNIT,
)
from src.numerus.domain.errors import ErrorCode, NumerusError
from src.numerus.domain.fraction import Fraction
from src.numerus.math.twelfths import simplify

_VINCULUM: Final[str] = "_"
_OVERLINE: Final[str] = "_"


# =============================================================================
# OVERLINE
# =============================================================================


def overline_numeral(numeral: str | None, crlf: bool = False) -> str:
    """
    Двухстрочное представление numeral с чертой над vinculum.

    Первая строка: пробелы над символами перед vinculum (например над '-'),
    затем '_' над каждым символом внутри vinculum. Вторая строка: numeral
    без двух разделителей '_'. Numeral без vinculum возвращается как есть.
    Синтаксис за пределами разделителей vinculum не проверяется.

    Args:
        numeral: Numeral, например "-_CXX_VIII"
        crlf: True для "\\r\\n", False для "\\n"

    Returns:
        Например " ___\\r\\n-CXXVIII"

    Raises:
        NumerusError: NULL_NUMERAL если numeral is None
        NumerusError: NON_TERMINATED_VINCULUM если '_' только один
    """
    if numeral is None:
        raise NumerusError(ErrorCode.NULL_NUMERAL)

    opening = numeral.find(_VINCULUM)
    if opening < 0:
        return numeral
    closing = numeral.find(_VINCULUM, opening + 1)
    if closing < 0:
        raise NumerusError(
            ErrorCode.NON_TERMINATED_VINCULUM, f"vinculum opened at position {opening}"
        )

    overline = " " * opening + _OVERLINE * (closing - opening - 1)
    end_of_line = "\r\n" if crlf else "\n"
    body = numeral[:opening] + numeral[opening + 1 : closing] + numeral[closing + 1 :]
    return overline + end_of_line + body


def fmt_overline_into(
    numeral: str | None, out: OutBuffer | None, crlf: bool = False
) -> int:
    """
    Запись overline-представления в буфер вызывающего.

    Args:
        numeral: Numeral
        out: bytearray ёмкостью >= MAX_OVERLINED_LENGTH (53)
        crlf: Windows ("\\r\\n") или Unix ("\\n") конец строки

    Returns:
        Количество записанных символов (без '\\0')

    Raises:
        NumerusError: NULL_BUFFER, NULL_NUMERAL, NON_TERMINATED_VINCULUM
        NumerusError: INVALID_SYNTAX если результат длиннее
            MAX_OVERLINED_LENGTH - 1 символов
    """
    check_out_buffer(out, MAX_OVERLINED_LENGTH)
    try:
        formatted = overline_numeral(numeral, crlf)
    except NumerusError:
        clear_cstring(out)
        raise
    if len(formatted) >= MAX_OVERLINED_LENGTH:
        clear_cstring(out)
        raise NumerusError(
            ErrorCode.INVALID_SYNTAX,
            f"overlined numeral of {len(formatted)} characters is too long",
        )
    return write_cstring(out, formatted, ErrorCode.INVALID_SYNTAX)


def fmt_overline(
    numeral: str | None,
    crlf: bool = False,
    allocator: Allocator = default_allocator,
) -> str:
    """
    Overline-представление как новая строка.

    Examples:
        >>> fmt_overline("-_CXX_VIII", crlf=True)
        ' ___\\r\\n-CXXVIII'
        >>> fmt_overline("XLII")
        'XLII'
    """
    return render_allocated(
        lambda buf: fmt_overline_into(numeral, buf, crlf), MAX_OVERLINED_LENGTH, allocator
    )


# =============================================================================
# FRACTION TEXT
# =============================================================================


def reduce_twelfths(twelfths: int) -> tuple[int, int]:
    """
    Сокращение twelfths/12 до несократимой дроби.

    Знак остаётся у числителя.

    Examples:
        >>> reduce_twelfths(2)
        (1, 6)
        >>> reduce_twelfths(-9)
        (-3, 4)
        >>> reduce_twelfths(7)
        (7, 12)
    """
    divisor = math.gcd(twelfths, TWELFTHS_PER_UNIT)
    return twelfths // divisor, TWELFTHS_PER_UNIT // divisor


def fraction_text(fraction: Fraction | tuple[int, int] | None) -> str:
    """
    Текстовое представление упрощённой дроби.

    Returns:
        "0" для нуля, "<n>" для целого, "<f>/<d>" для чистых двенадцатых,
        "<n>, <f>/<d>" для смешанного значения

    Raises:
        NumerusError: NULL_FRACTION, VALUE_OUT_OF_RANGE (через simplify)

    Examples:
        >>> fraction_text((-19, -11))
        '-19, -11/12'
        >>> fraction_text((1, 2))
        '1, 1/6'
        >>> fraction_text((0, -6))
        '-1/2'
    """
    int_part, twelfths = simplify(fraction)
    if twelfths == 0:
        return str(int_part)

    numerator, denominator = reduce_twelfths(twelfths)
    if int_part == 0:
        return f"{numerator}/{denominator}"
    return f"{int_part}, {numerator}/{denominator}"


def fmt_fraction_into(
    fraction: Fraction | tuple[int, int] | None, out: OutBuffer | None
) -> int:
    """
    Запись текстового представления дроби в буфер вызывающего.

    Args:
        fraction: Fraction (допускается неканоническая)
        out: bytearray ёмкостью >= MAX_FRACTION_TEXT_LENGTH (17)

    Raises:
        NumerusError: NULL_BUFFER, NULL_FRACTION, VALUE_OUT_OF_RANGE
    """
    check_out_buffer(out, MAX_FRACTION_TEXT_LENGTH)
    try:
        text = fraction_text(fraction)
    except NumerusError:
        clear_cstring(out)
        raise
    return write_cstring(out, text)


def fmt_fraction(
    fraction: Fraction | tuple[int, int] | None,
    allocator: Allocator = default_allocator,
) -> str:
    """Текстовое представление дроби как новая строка."""
    return render_allocated(
        lambda buf: fmt_fraction_into(fraction, buf), MAX_FRACTION_TEXT_LENGTH, allocator
    )
