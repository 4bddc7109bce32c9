"""
Buffers — Запись в буфер вызывающего и аллоцирующие обёртки

Две конвенции вывода, разделённые явно:
- *_into(..., out): запись NUL-терминированной ASCII строки в bytearray
  вызывающего фиксированной ёмкости
- аллоцирующие обёртки: рендер в локальный буфер максимального размера,
  затем копия только записанных байт через подключаемый allocator

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. При ошибке out[0] == 0 (пустая C-строка), частичный результат не виден
2. Аллоцирующая обёртка вызывает allocator только после успешного рендера
3. MemoryError аллокатора → NumerusError(ALLOCATION_FAILURE)
"""

from typing import Callable, Final, Union

from src.numerus.domain.errors import ErrorCode, NumerusError

# Буфер вызывающего: bytearray или writable memoryview
OutBuffer = Union[bytearray, memoryview]

# alloc(size) -> буфер ровно size байт
Allocator = Callable[[int], bytearray]

NUL: Final[int] = 0


def default_allocator(size: int) -> bytearray:
    """Стандартный allocator: новый bytearray нужного размера."""
    return bytearray(size)


def check_out_buffer(out: OutBuffer | None, capacity: int) -> OutBuffer:
    """
    Проверка буфера вывода перед записью.

    Args:
        out: Буфер вызывающего
        capacity: Документированная ёмкость операции (включая '\\0')

    Returns:
        Тот же буфер

    Raises:
        NumerusError: NULL_BUFFER если out is None
        ValueError: Если буфер меньше документированной ёмкости
    """
    if out is None:
        raise NumerusError(ErrorCode.NULL_BUFFER)
    if len(out) < capacity:
        raise ValueError(
            f"Output buffer must hold at least {capacity} bytes, got {len(out)}"
        )
    return out


def write_cstring(
    out: OutBuffer,
    text: str,
    overflow_code: ErrorCode = ErrorCode.VALUE_OUT_OF_RANGE,
) -> int:
    """
    Запись ASCII строки с терминатором '\\0'.

    Returns:
        Количество записанных символов (без терминатора)

    Raises:
        NumerusError: overflow_code если строка не помещается в out
            (буфер очищается)
    """
    encoded = text.encode("ascii")
    length = len(encoded)
    if length + 1 > len(out):
        clear_cstring(out)
        raise NumerusError(
            overflow_code,
            f"output buffer of {len(out)} bytes cannot hold {length + 1} bytes",
        )
    out[:length] = encoded
    out[length] = NUL
    return length


def clear_cstring(out: OutBuffer | None) -> None:
    """Безопасное состояние после ошибки: пустая C-строка."""
    if out is not None and len(out) > 0:
        out[0] = NUL


def read_cstring(buffer: OutBuffer) -> str:
    """Чтение NUL-терминированной ASCII строки из буфера."""
    raw = bytes(buffer)
    end = raw.find(NUL)
    if end < 0:
        end = len(raw)
    return raw[:end].decode("ascii")


def render_allocated(
    render_into: Callable[[bytearray], int],
    capacity: int,
    allocator: Allocator = default_allocator,
) -> str:
    """
    Рендер во временный буфер, затем дублирование через allocator.

    Args:
        render_into: Функция записи в буфер (возвращает длину без '\\0')
        capacity: Максимальный размер результата, включая '\\0'
        allocator: alloc(size) -> bytearray

    Returns:
        Результат как str (владение передаётся вызывающему)

    Raises:
        NumerusError: Ошибки render_into без изменений
        NumerusError: ALLOCATION_FAILURE если allocator не смог выделить память
    """
    local = bytearray(capacity)
    length = render_into(local)
    try:
        heap = allocator(length + 1)
    except MemoryError as exc:
        raise NumerusError(
            ErrorCode.ALLOCATION_FAILURE, f"{length + 1} bytes requested"
        ) from exc
    if heap is None or len(heap) < length + 1:
        raise NumerusError(ErrorCode.ALLOCATION_FAILURE, f"{length + 1} bytes requested")
    heap[: length + 1] = local[: length + 1]
    return read_cstring(heap)
