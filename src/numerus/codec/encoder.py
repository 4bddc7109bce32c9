"""
Encoder — Значение → канонический римский numeral

Три точки входа (int, Fraction, float) сводятся к кодированию Fraction:

    simplify → NULLA? → '-'? → ['_' vinculum '_'] → целая часть → двенадцатые

Greedy peel: для каждого глифа начиная с индекса k, пока остаток >= value,
дописать символы глифа и вычесть value. Счётчик повторов не нужен: порядок
словаря и max_repetitions гарантируют валидный numeral.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. int_part > BASIC_MAX → vinculum; после vinculum M запрещён (пик с CM)
2. Вывод всегда в верхнем регистре, длина <= MAX_EXTENDED_LENGTH - 1
3. При ошибке в буфер пишется только '\\0'
"""

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
    BASIC_MAX,
    MAX_BASIC_LENGTH,
    MAX_EXTENDED_LENGTH,
    VINCULUM_MULTIPLIER,
    ZERO_NUMERAL,
)
from src.numerus.domain.dictionary import DICTIONARY, INDEX_CM, INDEX_M, INDEX_S
from src.numerus.domain.errors import ErrorCode, NumerusError
from src.numerus.domain.fraction import Fraction
from src.numerus.math.twelfths import check_int32, double_to_fraction, simplify


# =============================================================================
# GREEDY PEEL
# =============================================================================


def _peel(value: int, start_index: int, parts: list[str]) -> None:
    """Жадная эмиссия глифов начиная с DICTIONARY[start_index]."""
    for glyph in DICTIONARY[start_index:]:
        if value <= 0:
            break
        while value >= glyph.value:
            parts.append(glyph.chars)
            value -= glyph.value


def fraction_to_numeral(fraction: Fraction | tuple[int, int] | None) -> str:
    """
    Построение канонического numeral для дроби.

    Args:
        fraction: Fraction, допускается неканоническая

    Returns:
        Numeral, например "_MMMCM_I..." для (3 900 001, 3)

    Raises:
        NumerusError: NULL_FRACTION / VALUE_OUT_OF_RANGE (через simplify)
    """
    int_part, twelfths = simplify(fraction)

    if int_part == 0 and twelfths == 0:
        return ZERO_NUMERAL

    parts: list[str] = []
    if int_part < 0 or twelfths < 0:
        parts.append("-")
        int_part = -int_part
        twelfths = -twelfths

    if int_part > BASIC_MAX:
        thousands, rest = divmod(int_part, VINCULUM_MULTIPLIER)
        parts.append("_")
        _peel(thousands, INDEX_M, parts)
        parts.append("_")
        _peel(rest, INDEX_CM, parts)
    else:
        _peel(int_part, INDEX_M, parts)

    _peel(twelfths, INDEX_S, parts)
    return "".join(parts)


# =============================================================================
# FIXED-BUFFER ENCODERS
# =============================================================================


def encode_fraction_into(
    fraction: Fraction | tuple[int, int] | None, out: OutBuffer | None
) -> int:
    """
    Запись numeral дроби в буфер вызывающего.

    Args:
        fraction: Fraction (допускается неканоническая)
        out: bytearray ёмкостью >= MAX_EXTENDED_LENGTH (37)

    Returns:
        Количество записанных символов (без '\\0')

    Raises:
        NumerusError: NULL_BUFFER, NULL_FRACTION, VALUE_OUT_OF_RANGE
    """
    check_out_buffer(out, MAX_EXTENDED_LENGTH)
    try:
        numeral = fraction_to_numeral(fraction)
    except NumerusError:
        clear_cstring(out)
        raise
    return write_cstring(out, numeral)


def encode_int_into(value: int | None, out: OutBuffer | None) -> int:
    """
    Запись numeral целого числа в буфер вызывающего.

    Значения вне [BASIC_MIN, BASIC_MAX] кодируются с vinculum, если они
    в [EXTENDED_INT_MIN, EXTENDED_INT_MAX]. Буфера MAX_BASIC_LENGTH (17)
    достаточно для basic значений, для extended нужен MAX_EXTENDED_LENGTH.

    Examples:
        >>> buf = bytearray(37)
        >>> encode_int_into(42, buf)
        4
        >>> bytes(buf[:5])
        b'XLII\\x00'

    Raises:
        NumerusError: NULL_BUFFER, NULL_INT, VALUE_OUT_OF_RANGE
    """
    check_out_buffer(out, MAX_BASIC_LENGTH)
    if value is None:
        clear_cstring(out)
        raise NumerusError(ErrorCode.NULL_INT)
    try:
        check_int32(value, "value")
        numeral = fraction_to_numeral(Fraction(value, 0))
    except NumerusError:
        clear_cstring(out)
        raise
    return write_cstring(out, numeral)


def encode_double_into(real: float | None, out: OutBuffer | None) -> int:
    """
    Запись numeral вещественного числа (округлённого до 1/12) в буфер.

    Raises:
        NumerusError: NULL_BUFFER, NULL_DOUBLE, NOT_FINITE_DOUBLE,
            VALUE_OUT_OF_RANGE
    """
    check_out_buffer(out, MAX_EXTENDED_LENGTH)
    try:
        fraction = double_to_fraction(real)
    except NumerusError:
        clear_cstring(out)
        raise
    return encode_fraction_into(fraction, out)


# =============================================================================
# ALLOCATING ENCODERS
# =============================================================================


def encode_fraction(
    fraction: Fraction | tuple[int, int] | None,
    allocator: Allocator = default_allocator,
) -> str:
    """
    Numeral дроби как новая строка.

    Examples:
        >>> encode_fraction((3_900_001, 3))
        '_MMMCM_I...'
        >>> encode_fraction((10, -59))
        'V.'
    """
    return render_allocated(
        lambda buf: encode_fraction_into(fraction, buf), MAX_EXTENDED_LENGTH, allocator
    )


def encode_int(value: int | None, allocator: Allocator = default_allocator) -> str:
    """
    Numeral целого числа как новая строка.

    Examples:
        >>> encode_int(42)
        'XLII'
        >>> encode_int(4000)
        '_IV_'
    """
    return render_allocated(
        lambda buf: encode_int_into(value, buf), MAX_EXTENDED_LENGTH, allocator
    )


def encode_double(real: float | None, allocator: Allocator = default_allocator) -> str:
    """
    Numeral вещественного числа как новая строка.

    Examples:
        >>> encode_double(1.5)
        'IS'
    """
    return render_allocated(
        lambda buf: encode_double_into(real, buf), MAX_EXTENDED_LENGTH, allocator
    )
