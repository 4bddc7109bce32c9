"""
Domain value objects and constants.

Contains the glyph dictionary, value envelopes, Fraction and error codes.
ConversionRecord depends on the codec and is imported from its own module.
"""

from src.numerus.domain.constants import (
    BASIC_MAX,
    BASIC_MIN,
    EXTENDED_INT_MAX,
    EXTENDED_INT_MIN,
    EXTENDED_MAX,
    EXTENDED_MIN,
    MAX_BASIC_LENGTH,
    MAX_EXTENDED_LENGTH,
    MAX_FRACTION_TEXT_LENGTH,
    MAX_OVERLINED_LENGTH,
    ZERO_NUMERAL,
)
from src.numerus.domain.dictionary import DICTIONARY, GlyphEntry
from src.numerus.domain.errors import ErrorCode, NumerusError, describe
from src.numerus.domain.fraction import ZERO_FRACTION, Fraction

__all__ = [
    # Constants
    "BASIC_MAX",
    "BASIC_MIN",
    "EXTENDED_INT_MAX",
    "EXTENDED_INT_MIN",
    "EXTENDED_MAX",
    "EXTENDED_MIN",
    "MAX_BASIC_LENGTH",
    "MAX_EXTENDED_LENGTH",
    "MAX_FRACTION_TEXT_LENGTH",
    "MAX_OVERLINED_LENGTH",
    "ZERO_NUMERAL",
    # Dictionary
    "DICTIONARY",
    "GlyphEntry",
    # Errors
    "ErrorCode",
    "NumerusError",
    "describe",
    # Fraction
    "Fraction",
    "ZERO_FRACTION",
]
