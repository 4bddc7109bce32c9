"""
Dictionary — Таблица римских глифов

Фиксированная read-only таблица из 15 глифов, которая управляет и
кодированием (greedy peel), и декодированием (монотонный курсор).

Порядок записей и есть грамматика: исключения вида
(CM)|(CD)|(D?C{0,3}) следуют из порядка и max_repetitions,
а не из явных ветвлений.

Индексы 0–12 покрывают целую часть, 13–14 двенадцатые.
M (индекс 0) запрещён после vinculum: разбор/кодирование начинается с CM.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class GlyphEntry:
    """Запись словаря: значение, максимум повторов подряд, 1–2 символа."""

    value: int
    max_repetitions: int
    chars: str

    @property
    def is_single_char(self) -> bool:
        """True для M, D, C, L, X, V, I, S и '.'"""
        return len(self.chars) == 1


DICTIONARY: Final[tuple[GlyphEntry, ...]] = (
    GlyphEntry(1000, 3, "M"),  # 0
    GlyphEntry(900, 1, "CM"),  # 1
    GlyphEntry(500, 1, "D"),  # 2
    GlyphEntry(400, 1, "CD"),  # 3
    GlyphEntry(100, 3, "C"),  # 4
    GlyphEntry(90, 1, "XC"),  # 5
    GlyphEntry(50, 1, "L"),  # 6
    GlyphEntry(40, 1, "XL"),  # 7
    GlyphEntry(10, 3, "X"),  # 8
    GlyphEntry(9, 1, "IX"),  # 9
    GlyphEntry(5, 1, "V"),  # 10
    GlyphEntry(4, 1, "IV"),  # 11
    GlyphEntry(1, 3, "I"),  # 12
    GlyphEntry(6, 1, "S"),  # 13
    GlyphEntry(1, 5, "."),  # 14
)

INDEX_M: Final[int] = 0
INDEX_CM: Final[int] = 1
INDEX_I: Final[int] = 12
INDEX_S: Final[int] = 13
INDEX_DOT: Final[int] = 14

# Символы, с которых может начинаться тело numeral (после '-')
GLYPH_STARTERS: Final[frozenset[str]] = frozenset("_MDCLXVIS.")


def is_twelfths_glyph(index: int) -> bool:
    """Глиф относится к дробной части (S или '.')."""
    return index >= INDEX_S
