"""
Constants — Границы значений и размеры буферов

Единственный источник истины для:
- диапазонов значений (basic / extended)
- максимальных длин строк (включая терминатор '\\0')
- литерала нуля NULLA

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. EXTENDED_MAX = EXTENDED_INT_MAX + 11/12 (ровно, без half-twelfth slack)
2. Все *_LENGTH включают терминатор '\\0'
"""

from typing import Final


# =============================================================================
# ДИАПАЗОНЫ ЗНАЧЕНИЙ
# =============================================================================

# Basic numeral: без vinculum и без twelfths
BASIC_MAX: Final[int] = 3999
BASIC_MIN: Final[int] = -BASIC_MAX

# Extended numeral: целая часть (vinculum умножает на 1000)
EXTENDED_INT_MAX: Final[int] = 3_999_999
EXTENDED_INT_MIN: Final[int] = -EXTENDED_INT_MAX

# Extended numeral: с дробной частью в двенадцатых
EXTENDED_MAX: Final[float] = EXTENDED_INT_MAX + 11.0 / 12.0
EXTENDED_MIN: Final[float] = -EXTENDED_MAX

TWELFTHS_PER_UNIT: Final[int] = 12
MAX_TWELFTHS: Final[int] = 11
VINCULUM_MULTIPLIER: Final[int] = 1000

# Знаковый 32-битный диапазон полей Fraction
INT32_MAX: Final[int] = 2**31 - 1
INT32_MIN: Final[int] = -(2**31)


# =============================================================================
# ДЛИНЫ СТРОК (включая '\0')
# =============================================================================

# "-MMMDCCCLXXXVIII\0"
MAX_BASIC_LENGTH: Final[int] = 17

# "-_MMMDCCCLXXXVIII_DCCCLXXXVIIIS.....\0"
MAX_EXTENDED_LENGTH: Final[int] = 37

# " _______________\r\n-MMMDCCCLXXXVIIIDCCCLXXXVIIIS.....\0"
MAX_OVERLINED_LENGTH: Final[int] = 53

# "-3999999, -11/12\0": целая часть extended-диапазона до 7 цифр
MAX_FRACTION_TEXT_LENGTH: Final[int] = 17

# Максимум римских символов в extended numeral (без '\0')
MAX_ROMAN_CHARS: Final[int] = MAX_EXTENDED_LENGTH - 1


# =============================================================================
# СПЕЦИАЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================

ZERO_NUMERAL: Final[str] = "NULLA"
ZERO_NUMERAL_SIZE: Final[int] = 6
