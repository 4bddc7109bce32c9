"""
Тесты для Buffers (буфер вызывающего и аллоцирующие обёртки)

Проверяет:
1. Запись / чтение NUL-терминированных строк
2. Проверку буфера: None и недостаточная ёмкость
3. Аллоцирующие обёртки: allocator вызывается ровно на длину результата,
   только после успешного рендера; MemoryError → ALLOCATION_FAILURE
"""

import pytest

from src.numerus.codec.buffers import (
    check_out_buffer,
    clear_cstring,
    default_allocator,
    read_cstring,
    render_allocated,
    write_cstring,
)
from src.numerus.codec.encoder import encode_double, encode_fraction, encode_int
from src.numerus.codec.formatting import fmt_fraction, fmt_overline
from src.numerus.domain.errors import ErrorCode, NumerusError


class RecordingAllocator:
    """Allocator, который запоминает запрошенные размеры."""

    def __init__(self):
        self.requests: list[int] = []

    def __call__(self, size: int) -> bytearray:
        self.requests.append(size)
        return bytearray(size)


def failing_allocator(size: int) -> bytearray:
    raise MemoryError(f"cannot allocate {size} bytes")


def short_allocator(size: int) -> bytearray:
    return bytearray(size - 1)


# =============================================================================
# C-СТРОКИ
# =============================================================================


class TestCString:
    """Тесты для write_cstring / read_cstring / clear_cstring"""

    def test_write_and_read(self) -> None:
        out = bytearray(b"#" * 8)
        assert write_cstring(out, "XLII") == 4
        assert bytes(out[:5]) == b"XLII\x00"
        assert read_cstring(out) == "XLII"

    def test_exact_fit(self) -> None:
        out = bytearray(5)
        assert write_cstring(out, "XLII") == 4

    def test_overflow_clears_buffer(self) -> None:
        out = bytearray(b"#" * 4)
        with pytest.raises(NumerusError, match="cannot hold 5 bytes") as exc_info:
            write_cstring(out, "XLII")
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert out[0] == 0

    def test_overflow_code(self) -> None:
        out = bytearray(2)
        with pytest.raises(NumerusError) as exc_info:
            write_cstring(out, "XLII", ErrorCode.INVALID_SYNTAX)
        assert exc_info.value.code == ErrorCode.INVALID_SYNTAX

    def test_clear(self) -> None:
        out = bytearray(b"IV\x00")
        clear_cstring(out)
        assert read_cstring(out) == ""

    def test_clear_tolerates_none_and_empty(self) -> None:
        clear_cstring(None)
        clear_cstring(bytearray())

    def test_read_without_terminator(self) -> None:
        assert read_cstring(bytearray(b"MMX")) == "MMX"


class TestCheckOutBuffer:
    """Тесты для check_out_buffer"""

    def test_none(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            check_out_buffer(None, 17)
        assert exc_info.value.code == ErrorCode.NULL_BUFFER

    def test_too_small(self) -> None:
        with pytest.raises(ValueError, match="at least 17 bytes, got 16"):
            check_out_buffer(bytearray(16), 17)

    def test_returns_same_buffer(self) -> None:
        out = bytearray(17)
        assert check_out_buffer(out, 17) is out


# =============================================================================
# АЛЛОЦИРУЮЩИЕ ОБЁРТКИ
# =============================================================================


class TestAllocatingWrappers:
    """Тесты для render_allocated и аллоцирующих функций"""

    def test_default_allocator(self) -> None:
        assert default_allocator(3) == bytearray(3)

    def test_allocates_exact_size(self) -> None:
        """Allocator получает длину результата + 1 для '\\0'"""
        allocator = RecordingAllocator()
        assert encode_int(42, allocator=allocator) == "XLII"
        assert allocator.requests == [5]

    @pytest.mark.parametrize(
        "call,expected",
        [
            (lambda alloc: encode_int(4000, allocator=alloc), "_IV_"),
            (lambda alloc: encode_fraction((1, 6), allocator=alloc), "IS"),
            (lambda alloc: encode_double(-0.5, allocator=alloc), "-S"),
            (lambda alloc: fmt_overline("_IV_", allocator=alloc), "__\nIV"),
            (lambda alloc: fmt_fraction((1, 2), allocator=alloc), "1, 1/6"),
        ],
    )
    def test_every_wrapper_uses_allocator(self, call, expected) -> None:
        allocator = RecordingAllocator()
        assert call(allocator) == expected
        assert allocator.requests == [len(expected) + 1]

    @pytest.mark.parametrize(
        "call",
        [
            lambda alloc: encode_int(42, allocator=alloc),
            lambda alloc: encode_fraction((1, 6), allocator=alloc),
            lambda alloc: encode_double(1.5, allocator=alloc),
            lambda alloc: fmt_overline("_IV_", allocator=alloc),
            lambda alloc: fmt_fraction((1, 2), allocator=alloc),
        ],
    )
    def test_memory_error_becomes_allocation_failure(self, call) -> None:
        with pytest.raises(NumerusError) as exc_info:
            call(failing_allocator)
        assert exc_info.value.code == ErrorCode.ALLOCATION_FAILURE
        assert isinstance(exc_info.value.__cause__, MemoryError)

    def test_short_allocation_is_failure(self) -> None:
        with pytest.raises(NumerusError) as exc_info:
            encode_int(42, allocator=short_allocator)
        assert exc_info.value.code == ErrorCode.ALLOCATION_FAILURE

    def test_no_allocation_on_render_error(self) -> None:
        """Allocator не вызывается, если рендер завершился ошибкой"""
        allocator = RecordingAllocator()
        with pytest.raises(NumerusError) as exc_info:
            encode_int(4_000_000, allocator=allocator)
        assert exc_info.value.code == ErrorCode.VALUE_OUT_OF_RANGE
        assert allocator.requests == []

    def test_render_allocated_directly(self) -> None:
        def render(buf: bytearray) -> int:
            return write_cstring(buf, "MMX")

        assert render_allocated(render, 8) == "MMX"
