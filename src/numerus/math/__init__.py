"""
Math modules для Numerus

Алгебра дробей в двенадцатых с точным сохранением значения.
"""

from src.numerus.math.twelfths import (
    double_to_fraction,
    fraction_to_double,
    is_canonical,
    round_half_away,
    simplify,
    trunc_divmod,
)

__all__ = [
    "double_to_fraction",
    "fraction_to_double",
    "is_canonical",
    "round_half_away",
    "simplify",
    "trunc_divmod",
]
