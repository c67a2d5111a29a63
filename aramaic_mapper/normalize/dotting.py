"""Detection and removal of vowel and diacritic dotting."""

from collections.abc import Callable
from typing import Any


def has_dotting(is_dotting: Callable[[str], bool]) -> Callable[[Any], bool]:
    """
    Build a function telling whether a word carries any dotting.

    Args:
        is_dotting: Predicate for vowel/diacritic characters

    Returns:
        Function returning True if any character of the word is dotting
    """

    def is_dotted(word: Any) -> bool:
        if not word:
            return False
        return any(is_dotting(char) for char in word)

    return is_dotted


def clear_dotting(is_dotting: Callable[[str], bool]) -> Callable[[Any], Any]:
    """
    Build a function stripping dotting from a word.

    Args:
        is_dotting: Predicate for vowel/diacritic characters

    Returns:
        Function returning the consonantal skeleton of a word. A word without
        dotting is returned as the same object.
    """

    def remove_dotting(word: Any) -> Any:
        if not word:
            return word
        skeleton = "".join(char for char in word if not is_dotting(char))
        return word if len(skeleton) == len(word) else skeleton

    return remove_dotting
