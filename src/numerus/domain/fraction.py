"""
Fraction — Значение в виде целой части и двенадцатых

Пара (int_part, twelfths) обозначает рациональное int_part + twelfths/12.

Каноническая форма (после simplify):
1. |twelfths| <= 11
2. int_part и twelfths одного знака (или одно из них равно нулю)
3. Значение в [-3 999 999 - 11/12, +3 999 999 + 11/12]

Неканоническая Fraction допустима на входе операций; выход всегда канонический.
"""

from typing import NamedTuple


class Fraction(NamedTuple):
    """Immutable пара (int_part, twelfths), сравнима с обычным tuple."""

    int_part: int
    twelfths: int = 0

    @property
    def is_zero(self) -> bool:
        return self.int_part == 0 and self.twelfths == 0

    @property
    def is_negative(self) -> bool:
        """True если хотя бы одна часть отрицательна (для канонической формы)."""
        return self.int_part < 0 or self.twelfths < 0

    def negated(self) -> "Fraction":
        return Fraction(-self.int_part, -self.twelfths)

    def total_twelfths(self) -> int:
        """Значение, выраженное целым числом двенадцатых (точно)."""
        return self.int_part * 12 + self.twelfths


ZERO_FRACTION = Fraction(0, 0)
