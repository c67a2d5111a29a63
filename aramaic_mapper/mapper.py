"""Character mapping between two Aramaic writing systems."""

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from aramaic_mapper.errors import WritingMismatchError
from aramaic_mapper.models import Category, Writing
from aramaic_mapper.qc.validate_writing import validate_writing_pair
from aramaic_mapper.utils.log import log_with_context


logger = logging.getLogger(__name__)


class MappingTable(Mapping[str, str]):
    """
    Read-only character table from a source writing to a destination one.

    A character mapped to ``""`` is deleted by the mapping, which is not the
    same as having no entry (unmapped characters are copied through).
    """

    def __init__(self, entries: Mapping[str, str], multiples: Iterable[str] = ()) -> None:
        self._entries = MappingProxyType(dict(entries))
        self._multiples = frozenset(multiples)

    @property
    def multiples(self) -> frozenset[str]:
        """Callback fragments longer than one character that consume one source character."""
        return self._multiples

    @classmethod
    def build(
        cls,
        from_writing: Writing,
        to_writing: Writing,
        multiples: Iterable[str] = (),
    ) -> "MappingTable":
        """
        Build the table from two writings, category by category.

        Args:
            from_writing: Source writing system
            to_writing: Destination writing system
            multiples: Multi-character callback fragments that consume a
                single source character

        Returns:
            Frozen mapping table
        """
        entries: dict[str, str] = {}
        truncated: list[str] = []

        for cat in Category:
            src = from_writing.category(cat)
            dst = to_writing.category(cat)
            if not cat.required and (src is None or dst is None):
                continue

            src = src or ()
            dst = dst or ()
            for i, char in enumerate(src):
                if i < len(dst):
                    entries[char] = dst[i]
                else:
                    # No destination character: leave the source unmapped
                    entries.pop(char, None)
            if len(dst) < len(src):
                truncated.append(cat.value)

        table = cls(entries, multiples)
        log_with_context(
            logger,
            "debug",
            "Built mapping table",
            entries=len(table),
            multiples=sorted(table.multiples),
            truncated=truncated,
        )
        return table

    def __getitem__(self, char: str) -> str:
        return self._entries[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MappingTable({dict(self._entries)!r})"


#: Custom mapping callback: (text, index, table[, context]) -> fragment
MapCallback = Callable[..., Any]


class SubstitutionStrategy(ABC):
    """Produces the replacement fragment for one position of a text."""

    @abstractmethod
    def fragment(self, text: str, index: int, table: MappingTable, context: Any = None) -> Any:
        """
        Return the replacement for ``text[index]``.

        Args:
            text: Full text being mapped
            index: Current position
            table: Character mapping table
            context: Optional caller data

        Returns:
            Replacement fragment
        """

    def advance(self, fragment: str, table: MappingTable) -> int:
        """Number of source characters consumed by a fragment."""
        return 1


class TableLookup(SubstitutionStrategy):
    """One-to-one lookup, unmapped characters pass through."""

    def fragment(self, text: str, index: int, table: MappingTable, context: Any = None) -> str:
        char = text[index]
        return table.get(char, char)


class CustomHook(SubstitutionStrategy):
    """
    Delegates to a caller callback, which handles any look-ahead itself.

    The callback may take ``(text, index, table)`` or
    ``(text, index, table, context)``. A fragment consumes as many source
    characters as it is long, unless it is registered in ``table.multiples``.
    """

    def __init__(self, callback: MapCallback) -> None:
        self.callback = callback
        self.takes_context = _takes_context(callback)

    def fragment(self, text: str, index: int, table: MappingTable, context: Any = None) -> Any:
        if self.takes_context:
            return self.callback(text, index, table, context)
        return self.callback(text, index, table)

    def advance(self, fragment: str, table: MappingTable) -> int:
        if fragment and fragment not in table.multiples:
            return len(fragment)
        return 1


def _takes_context(callback: Callable[..., Any]) -> bool:
    try:
        params = list(inspect.signature(callback).parameters.values())
    except (TypeError, ValueError):
        # Builtins without a signature get the full argument list
        return True

    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return True
    positional = [
        p
        for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    return len(positional) >= 4


class Mapper:
    """
    Map text from a base writing system to another one.

    ``map_callback`` is only needed when the one-to-one mapping is not
    enough, e.g. when the source stores a digraph in a different order
    than the destination. It is called with the text, the current index,
    the mapping table and the optional ``context`` given to
    :meth:`transform` (callbacks taking three arguments get no context), and
    returns the fragment for that index. The cursor then moves by the
    fragment length, unless the fragment is empty or registered in
    ``multiples``, in which case it moves by one. Without a callback the
    cursor always moves by one.
    """

    def __init__(
        self,
        from_writing: Writing,
        to_writing: Writing,
        map_callback: MapCallback | None = None,
        *,
        multiples: Iterable[str] = (),
        strict: bool = False,
    ):
        if strict:
            result = validate_writing_pair(from_writing, to_writing)
            if not result.valid:
                raise WritingMismatchError(result)
            if result.warnings:
                log_with_context(
                    logger, "warning", "Writing pair mapped with warnings", result=result
                )

        self._from_writing = from_writing
        self._to_writing = to_writing
        self._table = MappingTable.build(from_writing, to_writing, multiples)
        self.strategy: SubstitutionStrategy = (
            CustomHook(map_callback) if callable(map_callback) else TableLookup()
        )

    @property
    def from_writing(self) -> Writing:
        """Source writing system."""
        return self._from_writing

    @property
    def to_writing(self) -> Writing:
        """Destination writing system."""
        return self._to_writing

    @property
    def table(self) -> MappingTable:
        """Character mapping table."""
        return self._table

    def transform(self, text: Any, context: Any = None) -> Any:
        """
        Map text to the destination writing system.

        Args:
            text: Text to map. Falsy values (None, "", 0) are returned as is.
            context: Optional data passed through to the map callback

        Returns:
            Mapped text
        """
        if not text:
            return text
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        table = self._table
        parts: list[str] = []
        i = 0
        length = len(text)
        while i < length:
            fragment = self.strategy.fragment(text, i, table, context)
            if not isinstance(fragment, str):
                logger.debug(f"Ignoring {type(fragment).__name__} fragment at index {i}")
                fragment = ""
            parts.append(fragment)
            i += self.strategy.advance(fragment, table)

        return "".join(parts)
