"""Ordering of Aramaic words: consonants first, then dotting."""

from collections.abc import Callable, Mapping
from typing import Any


def to_ordinal(word: str, letter_ordinal_map: Mapping[str, str]) -> str:
    """
    Rewrite a word into its sort key.

    Args:
        word: Word to rewrite
        letter_ordinal_map: Character to ordinal character map. Characters
            mapped to "" are dropped, unmapped ones are kept.

    Returns:
        Ordinal string, comparable by code point
    """
    return "".join(letter_ordinal_map.get(char, char) for char in word)


def _compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


def get_sort(
    letter_ordinal_map: Mapping[str, str],
    remove_dotting: Callable[[Any], Any],
) -> Callable[[Any, Any], int]:
    """
    Build a three-way comparator for words of one writing system.

    Words are ordered by their consonantal skeleton. Dotting only breaks
    ties between identical skeletons.

    Args:
        letter_ordinal_map: Character to ordinal character map
        remove_dotting: Function returning the consonantal skeleton of a word

    Returns:
        Comparator returning -1, 0 or 1, usable with functools.cmp_to_key
    """

    def sort(word1: Any, word2: Any) -> int:
        if not word1 and not word2:
            return 0
        if not word1:
            return -1
        if not word2:
            return 1

        skeleton1 = remove_dotting(word1)
        skeleton2 = remove_dotting(word2)
        result = _compare(
            to_ordinal(skeleton1, letter_ordinal_map),
            to_ordinal(skeleton2, letter_ordinal_map),
        )
        if result:
            return result

        if word1 == skeleton1 and word2 == skeleton2:
            return 0

        return _compare(
            to_ordinal(word1, letter_ordinal_map),
            to_ordinal(word2, letter_ordinal_map),
        )

    return sort
