"""
Decoder — Римский numeral → значение

Все три точки входа (int, Fraction, float) сводятся к decode_fraction,
который реализует детерминированный state machine над словарём:

    PRE_SIGN → PRE_VINCULUM_OR_INT ─┬→ IN_VINCULUM_INT → POST_VINCULUM
                                    │       → IN_POST_VINCULUM_INT ─┐
                                    └→ IN_BASIC_INT ────────────────┴→ IN_TWELFTHS → END

Разбор секции: монотонный курсор по DICTIONARY: пока вход совпадает с
текущим глифом (1–2 символа, без учёта регистра), символы поглощаются и
считаются повторы; на max_repetitions курсор уходит дальше. Исключения
(CM)|(CD)|(D?C{0,3}) следуют из порядка словаря, а не из ветвлений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Первая же ошибка прерывает разбор, частичного результата нет
2. Работа O(n) по длине numeral
3. Результат канонический по построению (порядок глифов ограничивает значения)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

from src.numerus.domain.constants import VINCULUM_MULTIPLIER, ZERO_NUMERAL
from src.numerus.domain.dictionary import (
    DICTIONARY,
    INDEX_CM,
    INDEX_M,
    is_twelfths_glyph,
)
from src.numerus.domain.errors import ErrorCode, NumerusError
from src.numerus.domain.fraction import ZERO_FRACTION, Fraction
from src.numerus.math.twelfths import fraction_to_double


# Символы, завершающие целочисленные секции (сравнение после upper())
_VINCULUM_STOP_CHARS: Final[str] = "_S.-"
_POST_VINCULUM_STOP_CHARS: Final[str] = "S.M_-"
_BASIC_STOP_CHARS: Final[str] = "S._-"
_TWELFTHS_STOP_CHARS: Final[str] = "_-"


class ParserState(str, Enum):
    """Состояние разбора numeral."""

    PRE_SIGN = "PRE_SIGN"
    PRE_VINCULUM_OR_INT = "PRE_VINCULUM_OR_INT"
    IN_VINCULUM_INT = "IN_VINCULUM_INT"
    POST_VINCULUM = "POST_VINCULUM"
    IN_POST_VINCULUM_INT = "IN_POST_VINCULUM_INT"
    IN_BASIC_INT = "IN_BASIC_INT"
    IN_TWELFTHS = "IN_TWELFTHS"
    END = "END"


@dataclass
class ParserData:
    """Изменяемое состояние одного разбора."""

    numeral: str
    position: int = 0
    dictionary_index: int = INDEX_M
    repetitions: int = 0
    int_part: int = 0
    twelfths: int = 0
    sign: int = 1
    has_vinculum: bool = False
    state: ParserState = ParserState.PRE_SIGN

    @property
    def current(self) -> str:
        """Текущий символ в верхнем регистре или '' в конце строки."""
        if self.position >= len(self.numeral):
            return ""
        return self.numeral[self.position].upper()

    def at_end(self) -> bool:
        return self.position >= len(self.numeral)

    def enter_section(self, dictionary_index: int, state: ParserState) -> None:
        self.dictionary_index = dictionary_index
        self.repetitions = 0
        self.state = state


# =============================================================================
# DICTIONARY CURSOR
# =============================================================================


def _match_length(data: ParserData, chars: str) -> int:
    """Длина совпадения входа с символами глифа (0 если не совпадает)."""
    end = data.position + len(chars)
    if data.numeral[data.position:end].upper() == chars:
        return len(chars)
    return 0


def _advance_after_match(data: ParserData, matched_single_char: bool) -> None:
    """
    Сдвиг курсора после поглощённого глифа.

    Глифы с max_repetitions == 1 пропускаются до следующего повторяемого.
    Если поглощён двухсимвольный (субтрактивный) глиф, пропускается и
    повторяемый: после CM/CD не может идти C, после IX/IV не может идти I.
    """
    while DICTIONARY[data.dictionary_index].max_repetitions == 1:
        data.dictionary_index += 1
        data.repetitions = 0
    if not matched_single_char:
        data.dictionary_index += 1
        data.repetitions = 0


def _consume_with_dictionary(data: ParserData) -> None:
    """
    Сравнение текущей позиции с текущим глифом словаря.

    При совпадении поглощает символы и добавляет значение к int_part или
    twelfths. Иначе сдвигает курсор на следующий глиф; выход за конец
    словаря означает, что символ не может стоять в этой позиции.

    Raises:
        NumerusError: INVALID_SYNTAX при превышении повторов или выходе
            курсора за конец словаря
    """
    if data.dictionary_index >= len(DICTIONARY):
        raise NumerusError(
            ErrorCode.INVALID_SYNTAX,
            f"unexpected {data.current!r} at position {data.position}",
        )

    glyph = DICTIONARY[data.dictionary_index]
    matched = _match_length(data, glyph.chars)
    if matched == 0:
        data.dictionary_index += 1
        data.repetitions = 0
        return

    data.repetitions += 1
    if data.repetitions > glyph.max_repetitions:
        raise NumerusError(
            ErrorCode.INVALID_SYNTAX,
            f"too many repetitions of {glyph.chars!r} at position {data.position}",
        )
    data.position += matched
    if is_twelfths_glyph(data.dictionary_index):
        data.twelfths += glyph.value
    else:
        data.int_part += glyph.value
    _advance_after_match(data, glyph.is_single_char)


def _parse_section(data: ParserData, stop_chars: str) -> None:
    """Разбор секции до конца строки или первого стоп-символа."""
    while not data.at_end() and data.current not in stop_chars:
        _consume_with_dictionary(data)


def _invalid_here(data: ParserData) -> NumerusError:
    return NumerusError(
        ErrorCode.INVALID_SYNTAX,
        f"unexpected {data.current!r} at position {data.position}",
    )


# =============================================================================
# STATE HANDLERS
# =============================================================================


def _on_pre_sign(data: ParserData) -> None:
    if data.current == "-":
        data.sign = -1
        data.position += 1
        if data.at_end():
            raise NumerusError(ErrorCode.INVALID_SYNTAX, "sign without numeral")
    data.state = ParserState.PRE_VINCULUM_OR_INT


def _on_pre_vinculum_or_int(data: ParserData) -> None:
    if data.current == "_":
        data.position += 1
        data.has_vinculum = True
        data.enter_section(INDEX_M, ParserState.IN_VINCULUM_INT)
    else:
        data.enter_section(INDEX_M, ParserState.IN_BASIC_INT)


def _on_in_vinculum_int(data: ParserData) -> None:
    start = data.position
    _parse_section(data, _VINCULUM_STOP_CHARS)

    if data.current != "_":
        if data.at_end() or "_" not in data.numeral[data.position:]:
            raise NumerusError(
                ErrorCode.NON_TERMINATED_VINCULUM,
                f"vinculum opened at position {start - 1}",
            )
        raise _invalid_here(data)
    if data.position == start:
        raise NumerusError(ErrorCode.EMPTY_VINCULUM, f"at position {start - 1}")

    data.int_part *= VINCULUM_MULTIPLIER
    data.state = ParserState.POST_VINCULUM


def _on_post_vinculum(data: ParserData) -> None:
    # Закрывающий '_' уже проверен в IN_VINCULUM_INT
    data.position += 1
    data.enter_section(INDEX_CM, ParserState.IN_POST_VINCULUM_INT)


def _on_in_post_vinculum_int(data: ParserData) -> None:
    _parse_section(data, _POST_VINCULUM_STOP_CHARS)

    if data.current == "M":
        raise NumerusError(
            ErrorCode.M_AFTER_VINCULUM, f"at position {data.position}"
        )
    if data.current in ("_", "-"):
        raise _invalid_here(data)
    data.state = ParserState.IN_TWELFTHS


def _on_in_basic_int(data: ParserData) -> None:
    _parse_section(data, _BASIC_STOP_CHARS)

    if data.current in ("_", "-"):
        raise _invalid_here(data)
    data.state = ParserState.IN_TWELFTHS


def _on_in_twelfths(data: ParserData) -> None:
    # Курсор продолжает монотонно двигаться от места остановки целой части
    _parse_section(data, _TWELFTHS_STOP_CHARS)

    if not data.at_end():
        raise _invalid_here(data)
    data.state = ParserState.END


_HANDLERS: Final[dict[ParserState, Callable[[ParserData], None]]] = {
    ParserState.PRE_SIGN: _on_pre_sign,
    ParserState.PRE_VINCULUM_OR_INT: _on_pre_vinculum_or_int,
    ParserState.IN_VINCULUM_INT: _on_in_vinculum_int,
    ParserState.POST_VINCULUM: _on_post_vinculum,
    ParserState.IN_POST_VINCULUM_INT: _on_in_post_vinculum_int,
    ParserState.IN_BASIC_INT: _on_in_basic_int,
    ParserState.IN_TWELFTHS: _on_in_twelfths,
}


# =============================================================================
# PRE-SCAN
# =============================================================================


def skip_head_whitespace(numeral: str) -> str:
    """Пропуск ведущих ASCII пробельных символов."""
    return numeral.lstrip(" \t\n\r\v\f")


def prepare_for_analysis(numeral: str | None) -> str:
    """
    Общая предварительная проверка numeral.

    Args:
        numeral: Строка numeral

    Returns:
        numeral без ведущих пробелов

    Raises:
        NumerusError: NULL_NUMERAL если numeral is None
        NumerusError: EMPTY_NUMERAL если строка пуста или только из пробелов
    """
    if numeral is None:
        raise NumerusError(ErrorCode.NULL_NUMERAL)
    trimmed = skip_head_whitespace(numeral)
    if not trimmed:
        raise NumerusError(ErrorCode.EMPTY_NUMERAL)
    return trimmed


def is_zero_minus_ignored(numeral: str) -> bool:
    """NULLA или -NULLA без учёта регистра, без завершающих символов."""
    if numeral.startswith("-"):
        numeral = numeral[1:]
    return numeral.upper() == ZERO_NUMERAL


# =============================================================================
# PUBLIC DECODERS
# =============================================================================


def decode_fraction(numeral: str | None) -> Fraction:
    """
    Разбор numeral в каноническую Fraction.

    Args:
        numeral: Римский numeral; регистр не важен, ведущие пробелы допустимы

    Returns:
        Fraction(int_part, twelfths) с общим знаком

    Raises:
        NumerusError: NULL_NUMERAL, EMPTY_NUMERAL, INVALID_SYNTAX,
            NON_TERMINATED_VINCULUM, EMPTY_VINCULUM, M_AFTER_VINCULUM

    Examples:
        >>> decode_fraction("-_MMMDCCCLXXXVIII_DCCCLXXXVIIIS.....")
        Fraction(int_part=-3888888, twelfths=-11)
        >>> decode_fraction("nulla")
        Fraction(int_part=0, twelfths=0)
    """
    numeral = prepare_for_analysis(numeral)
    if is_zero_minus_ignored(numeral):
        return ZERO_FRACTION
    if not numeral.isascii():
        raise NumerusError(ErrorCode.INVALID_SYNTAX, "non-ASCII character")

    data = ParserData(numeral=numeral)
    while data.state != ParserState.END:
        _HANDLERS[data.state](data)

    return Fraction(data.sign * data.int_part, data.sign * data.twelfths)


def decode_int(numeral: str | None) -> int:
    """
    Разбор numeral без дробной части в int.

    Raises:
        NumerusError: Ошибки decode_fraction
        NumerusError: UNEXPECTED_TWELFTHS если numeral содержит S или '.'

    Examples:
        >>> decode_int("-XLII")
        -42
    """
    int_part, twelfths = decode_fraction(numeral)
    if twelfths != 0:
        raise NumerusError(ErrorCode.UNEXPECTED_TWELFTHS, f"twelfths={twelfths}")
    return int_part


def decode_double(numeral: str | None) -> float:
    """
    Разбор numeral в float.

    Examples:
        >>> decode_double("IS")
        1.5
    """
    return fraction_to_double(decode_fraction(numeral))
