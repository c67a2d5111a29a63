"""Data models for Aramaic writing systems."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum


class Category(str, Enum):
    """Character category, in table mapping order."""

    CONSONANTS = "consonants"
    VOWELS = "vowels"
    DIACRITICS = "diacritics"
    PUNCTUATION = "punctuation"
    OTHER = "other"

    @property
    def required(self) -> bool:
        """Consonants and vowels are mapped even when one side lacks them."""
        return self in (Category.CONSONANTS, Category.VOWELS)


class Vowel(IntEnum):
    """Vowel positions in the Sedra order."""

    A = 0
    O = 1
    E = 2
    I = 3
    U = 4

    # Eastern/Hebrew extensions
    SHORT_E = 5
    LONG_O = 6


class Diacritic(IntEnum):
    """Diacritic positions in the Sedra order."""

    QUSHAYA = 0
    RUKKAKHA = 1
    LINEA_OCCULTANS = 2
    SEYAME = 3


@dataclass(frozen=True)
class Writing:
    """
    An Aramaic writing system.

    Each mapped character must sit at the same position in the target
    writing as in the source one:

    - consonants in the standard Aramaic order
    - vowels in the Sedra [a o e i u] order, optionally followed by
      Eastern/Hebrew short E and long O
    - diacritics in the Sedra [' , _ *] order (qushaya, rukkakha, linea
      occultans, seyame), other diacritics appended after these
    - optional punctuation and other symbols (crosses, etc.)
    """

    consonants: Sequence[str]
    vowels: Sequence[str]
    diacritics: Sequence[str] | None = None
    punctuation: Sequence[str] | None = None
    other: Sequence[str] | None = None

    def __post_init__(self) -> None:
        for cat in Category:
            chars = getattr(self, cat.value)
            if chars is not None:
                object.__setattr__(self, cat.value, tuple(chars))

    def category(self, cat: Category) -> tuple[str, ...] | None:
        """Return the characters of a category, or None if absent."""
        chars: tuple[str, ...] | None = getattr(self, Category(cat).value)
        return chars
