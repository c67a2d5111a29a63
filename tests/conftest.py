"""Pytest fixtures for aramaic_mapper tests."""

from pathlib import Path

import pytest

from aramaic_mapper.models import Writing


SEDRA_CONSONANTS = [
    "A", "B", "G", "D", "H", "O", "Z", "K", "Y", ";", "C",
    "L", "M", "N", "S", "E", "I", "/", "X", "R", "W", "T",
]
CAL_CONSONANTS = [
    ")", "b", "g", "d", "h", "w", "z", "x", "T", "y", "k",
    "l", "m", "n", "s", "(", "p", "c", "q", "r", "$", "t",
]
VOWELS = ["a", "o", "e", "i", "u"]
DIACRITICS = ["'", ",", "_", "*"]

# a b c d e f g h i j k l m n o p q r s t u v - A O E I U
LETTER_ASCII_MAP = {
    "A": "a", "B": "b", "G": "c", "D": "d",
    "H": "e", "O": "f", "Z": "g",
    "K": "h", "Y": "i", ";": "j",
    "C": "k", "L": "l", "M": "m", "N": "n",
    "S": "o", "E": "p", "I": "q", "/": "r",
    "X": "s", "R": "t", "W": "u", "T": "v",
    "a": "w", "o": "x", "e": "y", "i": "z", "u": "{",
    "'": "", ",": ",", "_": "", "*": "",
}


@pytest.fixture
def sedra_writing() -> Writing:
    """Sedra writing system."""
    return Writing(SEDRA_CONSONANTS, VOWELS, DIACRITICS)


@pytest.fixture
def cal_writing() -> Writing:
    """CAL writing system, with Eastern short E and long O."""
    return Writing(CAL_CONSONANTS, VOWELS + ["E", "O"], DIACRITICS)


@pytest.fixture
def is_consonant(sedra_writing):
    """Sedra consonant predicate."""
    return lambda char: char in sedra_writing.consonants


@pytest.fixture
def is_dotting():
    """Sedra vowel and diacritic predicate."""
    dotting = set(VOWELS + DIACRITICS)
    return lambda char: char in dotting


@pytest.fixture
def letter_ascii_map() -> dict[str, str]:
    """Sedra letter ordinal values used for sorting."""
    return dict(LETTER_ASCII_MAP)


@pytest.fixture
def sedra_to_cal_callback(is_consonant):
    """Map callback handling the Sedra (iy), (uw) and (ow) vowel orders."""
    digraphs = {"i": (";", "yi"), "u": ("O", "wu"), "o": ("O", "wO")}

    def callback(word, index, cal_map, context=None):
        char = word[index]
        if char in digraphs:
            follower, replacement = digraphs[char]
            if word[index + 1:index + 2] == follower and is_consonant(word[index + 2:index + 3]):
                return replacement
        return cal_map.get(char, char)

    return callback


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixture files."""
    return Path(__file__).parent / "fixtures"
