"""
Numerus — conversion between values and extended roman numerals.

Extended numerals cover [-3 999 999 - 11/12, +3 999 999 + 11/12]:
vinculum "_..._" multiplies by 1000, "S" is 6/12, "." is 1/12, zero is NULLA.
"""

from src.numerus.codec import (
    compare_value,
    count_roman_chars,
    decode_double,
    decode_fraction,
    decode_int,
    encode_double,
    encode_double_into,
    encode_fraction,
    encode_fraction_into,
    encode_int,
    encode_int_into,
    fmt_fraction,
    fmt_fraction_into,
    fmt_overline,
    fmt_overline_into,
    is_extended,
    is_zero,
    sign,
)
from src.numerus.contracts import validate_conversion_record
from src.numerus.domain import (
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
    ErrorCode,
    Fraction,
    NumerusError,
    describe,
)
from src.numerus.domain.conversion_record import ConversionRecord
from src.numerus.math import double_to_fraction, fraction_to_double, simplify

__all__ = [
    # Encoder
    "encode_double",
    "encode_double_into",
    "encode_fraction",
    "encode_fraction_into",
    "encode_int",
    "encode_int_into",
    # Decoder
    "decode_double",
    "decode_fraction",
    "decode_int",
    # Fraction algebra
    "Fraction",
    "double_to_fraction",
    "fraction_to_double",
    "simplify",
    # Analysis
    "compare_value",
    "count_roman_chars",
    "is_extended",
    "is_zero",
    "sign",
    # Formatting
    "fmt_fraction",
    "fmt_fraction_into",
    "fmt_overline",
    "fmt_overline_into",
    # Errors
    "ErrorCode",
    "NumerusError",
    "describe",
    # Records
    "ConversionRecord",
    "validate_conversion_record",
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
]
