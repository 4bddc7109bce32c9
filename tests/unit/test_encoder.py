"""
Тесты для Encoder (значение → numeral)

Проверяет:
1. Кодирование int / Fraction / float в канонический numeral
2. Vinculum для значений > 3999 и запрет M после vinculum
3. Границы диапазона и ошибки входа
4. Варианты *_into: длина результата, '\\0', безопасное состояние при ошибке
"""

import math

import pytest

from src.numerus.codec.encoder import (
    encode_double,
    encode_double_into,
    encode_fraction,
    encode_fraction_into,
    encode_int,
    encode_int_into,
    fraction_to_numeral,
)
from src.numerus.domain.constants import (
    EXTENDED_INT_MAX,
    MAX_BASIC_LENGTH,
    MAX_EXTENDED_LENGTH,
)
from src.numerus.domain.errors import ErrorCode, NumerusError


@pytest.fixture
def out() -> bytearray:
    """Буфер максимальной ёмкости, заполненный мусором."""
    return bytearray(b"#" * MAX_EXTENDED_LENGTH)


# =============================================================================
# ENCODE INT
# =============================================================================


class TestEncodeInt:
    """Тесты для encode_int"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (42, "XLII"),
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (900, "CM"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
            (3888, "MMMDCCCLXXXVIII"),
            (3999, "MMMCMXCIX"),
            (-42, "-XLII"),
            (0, "NULLA"),
        ],
    )
    def test_basic(self, value, expected) -> None:
        assert encode_int(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (4000, "_IV_"),
            (-4000, "-_IV_"),
            (10_000, "_X_"),
            (120_008, "_CXX_VIII"),
            (1_000_000, "_M_"),
            (3_888_888, "_MMMDCCCLXXXVIII_DCCCLXXXVIII"),
            (EXTENDED_INT_MAX, "_MMMCMXCIX_CMXCIX"),
            (3_900_001, "_MMMCM_I"),
        ],
    )
    def test_extended_uses_vinculum(self, value, expected) -> None:
        """Значения > 3999 кодируются с vinculum, без M после него"""
        numeral = encode_int(value)
        assert numeral == expected
        assert "M" not in numeral.rpartition("_")[2]

    @pytest.mark.parametrize("value", [4_000_000, -4_000_000, 2**31 - 1, -(2**31)])
    def test_out_of_range(self, value) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_int(value)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE

    def test_beyond_int32(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_int(2**40)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE

    def test_none(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_int(None)
        assert exc_info.value.code == ErrorCode.NULL_INT

    @pytest.mark.parametrize("value", [2.5, 42.0, True])
    def test_non_integer_rejected(self, value) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_int(value)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE

    def test_sign_symmetry(self) -> None:
        """encode(-v) == '-' + encode(v)"""
        for value in (1, 49, 3999, 4000, 65_536, EXTENDED_INT_MAX):
            assert encode_int(-value) == "-" + encode_int(value)


# =============================================================================
# ENCODE FRACTION
# =============================================================================


class TestEncodeFraction:
    """Тесты для encode_fraction"""

    @pytest.mark.parametrize(
        "fraction,expected",
        [
            ((3_900_001, 3), "_MMMCM_I..."),
            ((10, -59), "V."),
            ((0, 0), "NULLA"),
            ((0, 6), "S"),
            ((0, 11), "S....."),
            ((0, -1), "-."),
            ((1, 6), "IS"),
            ((0, 13), "I."),
            ((-3_888_888, -11), "-_MMMDCCCLXXXVIII_DCCCLXXXVIIIS....."),
            ((EXTENDED_INT_MAX, 11), "_MMMCMXCIX_CMXCIXS....."),
        ],
    )
    def test_encode(self, fraction, expected) -> None:
        assert encode_fraction(fraction) == expected

    def test_longest_numeral_fits(self) -> None:
        """Самый длинный numeral занимает MAX_EXTENDED_LENGTH - 1 символ"""
        numeral = encode_fraction((-3_888_888, -11))
        assert len(numeral) == MAX_EXTENDED_LENGTH - 1

    def test_output_uppercase(self) -> None:
        for fraction in ((3999, 7), (-123_456, -5), (4, 0)):
            numeral = encode_fraction(fraction)
            assert numeral == numeral.upper()

    def test_twelfths_never_inside_vinculum(self) -> None:
        numeral = encode_fraction((5_000, 7))
        assert numeral == "_V_S."
        vinculum = numeral.split("_")[1]
        assert "S" not in vinculum and "." not in vinculum

    @pytest.mark.parametrize("fraction", [(EXTENDED_INT_MAX, 12), (4_000_000, 0)])
    def test_out_of_range(self, fraction) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_fraction(fraction)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE

    def test_none(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_fraction(None)
        assert exc_info.value.code == ErrorCode.NULL_FRACTION

    def test_float_fields_not_truncated(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_fraction((1.9, 0.9))
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE

    def test_fraction_to_numeral_matches_wrapper(self) -> None:
        assert fraction_to_numeral((10, -59)) == encode_fraction((10, -59))


# =============================================================================
# ENCODE DOUBLE
# =============================================================================


class TestEncodeDouble:
    """Тесты для encode_double"""

    @pytest.mark.parametrize(
        "real,expected",
        [
            (1.5, "IS"),
            (-0.5, "-S"),
            (0.0, "NULLA"),
            (42.0, "XLII"),
            (2.875, "IIS....."),
            (3_999_999.9999, "_MMMCMXCIX_CMXCIXS....."),
        ],
    )
    def test_encode(self, real, expected) -> None:
        assert encode_double(real) == expected

    @pytest.mark.parametrize("real", [math.nan, math.inf, -math.inf])
    def test_not_finite(self, real) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_double(real)
        assert exc_info.value.code == ErrorCode.NOT_FINITE_DOUBLE

    def test_out_of_range(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_double(4_000_000.0)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE

    def test_none(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_double(None)
        assert exc_info.value.code == ErrorCode.NULL_DOUBLE


# =============================================================================
# FIXED-BUFFER VARIANTS
# =============================================================================


class TestEncodeInto:
    """Тесты для encode_*_into"""

    def test_int_into_writes_nul_terminated(self, out) -> None:
        length = encode_int_into(42, out)
        assert length == 4
        assert bytes(out[:5]) == b"XLII\x00"

    def test_int_into_basic_buffer_enough_for_basic(self) -> None:
        """17 байт достаточно для любого basic значения"""
        buf = bytearray(MAX_BASIC_LENGTH)
        assert encode_int_into(-3888, buf) == MAX_BASIC_LENGTH - 1
        assert bytes(buf) == b"-MMMDCCCLXXXVIII\x00"

    def test_int_into_basic_buffer_too_small_for_extended(self) -> None:
        buf = bytearray(b"#" * MAX_BASIC_LENGTH)
        """Extended numeral длиннее 16 символов → VALUE_OUT_OF_RANGE, буфер пуст"""
        with pytest.raises(NumerusError) as exc_info:
            encode_int_into(3_888_888, buf)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert buf[0] == 0

    def test_int_into_basic_buffer_short_extended(self) -> None:
        buf = bytearray(MAX_BASIC_LENGTH)
        assert encode_int_into(4000, buf) == 4
        assert bytes(buf[:5]) == b"_IV_\x00"

    def test_int_into_non_integer_clears_buffer(self) -> None:
        buf = bytearray(b"#" * MAX_BASIC_LENGTH)
        with pytest.raises(NumerusError) as exc_info:
            encode_int_into(2.5, buf)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert buf[0] == 0

    def test_fraction_into(self, out) -> None:
        length = encode_fraction_into((3_900_001, 3), out)
        assert bytes(out[: length + 1]) == b"_MMMCM_I...\x00"

    def test_double_into(self, out) -> None:
        length = encode_double_into(1.5, out)
        assert bytes(out[: length + 1]) == b"IS\x00"

    def test_memoryview_buffer(self) -> None:
        backing = bytearray(MAX_EXTENDED_LENGTH)
        length = encode_int_into(4000, memoryview(backing))
        assert bytes(backing[: length + 1]) == b"_IV_\x00"

    @pytest.mark.parametrize(
        "call,code",
        [
            (lambda buf: encode_int_into(4_000_000, buf), ErrorCode.VALUE_OUT_OF_RANGE),
            (lambda buf: encode_int_into(None, buf), ErrorCode.NULL_INT),
            (lambda buf: encode_fraction_into(None, buf), ErrorCode.NULL_FRACTION),
            (lambda buf: encode_double_into(math.nan, buf), ErrorCode.NOT_FINITE_DOUBLE),
            (lambda buf: encode_double_into(None, buf), ErrorCode.NULL_DOUBLE),
        ],
    )
    def test_error_leaves_empty_string(self, out, call, code) -> None:
        """При ошибке в буфер записан только '\\0'"""
        with pytest.raises(NumerusError) as exc_info:
            call(out)
        assert exc_info.value.code == code
        assert out[0] == 0

    @pytest.mark.parametrize(
        "call",
        [
            lambda: encode_int_into(1, None),
            lambda: encode_fraction_into((1, 0), None),
            lambda: encode_double_into(1.0, None),
        ],
    )
    def test_null_buffer(self, call) -> None:
        with pytest.raises(NumerusError) as exc_info:
            call()
        assert exc_info.value.code == ErrorCode.NULL_BUFFER

    def test_buffer_below_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 37 bytes"):
            encode_fraction_into((1, 0), bytearray(MAX_EXTENDED_LENGTH - 1))
