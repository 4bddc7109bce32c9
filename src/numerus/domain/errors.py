"""
Errors — Коды ошибок и исключение NumerusError

Каждая операция, которая может завершиться неудачей, поднимает
NumerusError с кодом из ErrorCode. Глобального "last error" нет:
ошибка всегда возвращается вызывающему через исключение.

Категории:
- Null / empty input: NULL_NUMERAL, NULL_BUFFER, NULL_DOUBLE, NULL_INT,
  NULL_FRACTION, EMPTY_NUMERAL
- Range: VALUE_OUT_OF_RANGE, NOT_FINITE_DOUBLE
- Grammar: INVALID_SYNTAX, NON_TERMINATED_VINCULUM, EMPTY_VINCULUM,
  M_AFTER_VINCULUM, UNEXPECTED_TWELFTHS
- Resource: ALLOCATION_FAILURE
"""

from enum import Enum
from typing import Final


class ErrorCode(str, Enum):
    """Код ошибки Numerus."""

    NULL_NUMERAL = "NULL_NUMERAL"
    NULL_BUFFER = "NULL_BUFFER"
    NULL_DOUBLE = "NULL_DOUBLE"
    NULL_INT = "NULL_INT"
    NULL_FRACTION = "NULL_FRACTION"
    EMPTY_NUMERAL = "EMPTY_NUMERAL"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    NOT_FINITE_DOUBLE = "NOT_FINITE_DOUBLE"
    INVALID_SYNTAX = "INVALID_SYNTAX"
    NON_TERMINATED_VINCULUM = "NON_TERMINATED_VINCULUM"
    EMPTY_VINCULUM = "EMPTY_VINCULUM"
    M_AFTER_VINCULUM = "M_AFTER_VINCULUM"
    UNEXPECTED_TWELFTHS = "UNEXPECTED_TWELFTHS"
    ALLOCATION_FAILURE = "ALLOCATION_FAILURE"


_DESCRIPTIONS: Final[dict[ErrorCode, str]] = {
    ErrorCode.NULL_NUMERAL: "The numeral is missing (None).",
    ErrorCode.NULL_BUFFER: "The output buffer is missing (None).",
    ErrorCode.NULL_DOUBLE: "The floating point value is missing (None).",
    ErrorCode.NULL_INT: "The integer value is missing (None).",
    ErrorCode.NULL_FRACTION: "The fraction is missing (None).",
    ErrorCode.EMPTY_NUMERAL: "The numeral is empty or filled with whitespace.",
    ErrorCode.VALUE_OUT_OF_RANGE: (
        "The value is outside the range of representable roman numerals."
    ),
    ErrorCode.NOT_FINITE_DOUBLE: "The floating point value is NaN or infinite.",
    ErrorCode.INVALID_SYNTAX: (
        "The numeral contains illegal characters or mispositioned characters."
    ),
    ErrorCode.NON_TERMINATED_VINCULUM: (
        "The numeral opens a vinculum with '_' but never closes it."
    ),
    ErrorCode.EMPTY_VINCULUM: "The numeral contains an empty vinculum '__'.",
    ErrorCode.M_AFTER_VINCULUM: (
        "The numeral contains an 'M' character after the vinculum."
    ),
    ErrorCode.UNEXPECTED_TWELFTHS: (
        "The numeral has twelfths where an integer was expected."
    ),
    ErrorCode.ALLOCATION_FAILURE: "Heap memory allocation failure.",
}


def describe(code: ErrorCode) -> str:
    """
    Короткое человекочитаемое описание кода ошибки.

    Args:
        code: Код ошибки

    Returns:
        Статическая строка (одно предложение, без форматирования)

    Examples:
        >>> describe(ErrorCode.EMPTY_VINCULUM)
        "The numeral contains an empty vinculum '__'."
    """
    return _DESCRIPTIONS[ErrorCode(code)]


class NumerusError(ValueError):
    """
    Ошибка конвертации, парсинга или форматирования римского numeral.

    Attributes:
        code: Код ошибки (ErrorCode)
        detail: Необязательное уточнение (позиция, исходное значение)
    """

    def __init__(self, code: ErrorCode, detail: str | None = None):
        self.code = ErrorCode(code)
        self.detail = detail
        message = describe(self.code)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.code, self.detail))
