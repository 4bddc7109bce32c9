"""
Analysis — Дешёвые лексические предикаты над numeral

is_zero и sign толерантны к None / пустой строке (возвращают False / 0).
Остальные функции поднимают NumerusError на None / пустой ввод.
Ни одна функция, кроме compare_value, не проверяет полный синтаксис.
"""

from src.numerus.codec.decoder import (
    decode_fraction,
    is_zero_minus_ignored,
    prepare_for_analysis,
)
from src.numerus.domain.constants import MAX_ROMAN_CHARS, ZERO_NUMERAL
from src.numerus.domain.dictionary import GLYPH_STARTERS
from src.numerus.domain.errors import ErrorCode, NumerusError


# Символы, которые считаются римскими в count_roman_chars
_COUNTED_CHARS = frozenset("-MDCLXVIS.")
_EXTENDED_CHARS = frozenset("_S.")


def is_zero(numeral: str | None) -> bool:
    """
    True если numeral равен NULLA (опционально с '-'), без учёта регистра.

    Ведущие пробелы не допускаются: строка целиком должна быть нулём.

    Examples:
        >>> is_zero("nulla")
        True
        >>> is_zero("-NULLA")
        True
        >>> is_zero(None)
        False
    """
    if not numeral:
        return False
    return is_zero_minus_ignored(numeral)


def sign(numeral: str | None) -> int:
    """
    Знак numeral: 0, -1 или +1.

    0 для None / пустой строки / NULLA; -1 если '-' и за ним стартовый
    символ глифа; +1 иначе. Чисто лексическая проверка.

    Examples:
        >>> sign("-XLII")
        -1
        >>> sign("XLII")
        1
        >>> sign("-nulla")
        0
    """
    if not numeral or is_zero_minus_ignored(numeral):
        return 0
    if numeral[0] == "-" and len(numeral) > 1 and numeral[1].upper() in GLYPH_STARTERS:
        return -1
    return 1


def is_extended(numeral: str | None) -> bool:
    """
    True если numeral использует vinculum или двенадцатые ('_', 'S', '.').

    Raises:
        NumerusError: NULL_NUMERAL, EMPTY_NUMERAL
    """
    numeral = prepare_for_analysis(numeral)
    return any(char.upper() in _EXTENDED_CHARS for char in numeral)


def count_roman_chars(numeral: str | None) -> int:
    """
    Количество римских символов, включая '-', без '_' и пробелов.

    NULLA считается как 5 символов.

    Raises:
        NumerusError: NULL_NUMERAL, EMPTY_NUMERAL
        NumerusError: INVALID_SYNTAX для символов вне алфавита или если
            символов больше MAX_ROMAN_CHARS
    """
    numeral = prepare_for_analysis(numeral)
    if is_zero_minus_ignored(numeral):
        return len(ZERO_NUMERAL)

    found = 0
    for position, char in enumerate(numeral):
        if char.isascii() and char.upper() in _COUNTED_CHARS:
            found += 1
        elif char != "_" and not char.isspace():
            raise NumerusError(
                ErrorCode.INVALID_SYNTAX, f"illegal {char!r} at position {position}"
            )
        if found > MAX_ROMAN_CHARS:
            raise NumerusError(
                ErrorCode.INVALID_SYNTAX, f"more than {MAX_ROMAN_CHARS} characters"
            )
    return found


def compare_value(first: str | None, second: str | None) -> int:
    """
    Сравнение значений двух numeral.

    Returns:
        +1 если first > second, 0 если равны, -1 если first < second

    Raises:
        NumerusError: Любая ошибка разбора любого из numeral

    Examples:
        >>> compare_value("X", "IX")
        1
        >>> compare_value("-S", "NULLA")
        -1
    """
    first_total = decode_fraction(first).total_twelfths()
    second_total = decode_fraction(second).total_twelfths()
    return (first_total > second_total) - (first_total < second_total)
