"""
Codec: encoder/decoder pair, analysis helpers and formatters.
"""

from src.numerus.codec.analysis import (
    compare_value,
    count_roman_chars,
    is_extended,
    is_zero,
    sign,
)
from src.numerus.codec.buffers import Allocator, OutBuffer, default_allocator
from src.numerus.codec.decoder import (
    ParserState,
    decode_double,
    decode_fraction,
    decode_int,
)
from src.numerus.codec.encoder import (
    encode_double,
    encode_double_into,
    encode_fraction,
    encode_fraction_into,
    encode_int,
    encode_int_into,
)
from src.numerus.codec.formatting import (
    fmt_fraction,
    fmt_fraction_into,
    fmt_overline,
    fmt_overline_into,
)

__all__ = [
    # Encoder
    "encode_double",
    "encode_double_into",
    "encode_fraction",
    "encode_fraction_into",
    "encode_int",
    "encode_int_into",
    # Decoder
    "ParserState",
    "decode_double",
    "decode_fraction",
    "decode_int",
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
    # Buffers
    "Allocator",
    "OutBuffer",
    "default_allocator",
]
