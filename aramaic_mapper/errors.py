"""Exceptions raised for writing system configuration problems."""

from typing import Any


class WritingConfigError(ValueError):
    """A writing definition or mapper configuration is unusable."""


class WritingMismatchError(WritingConfigError):
    """Two writing systems do not line up position by position."""

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__("Writing systems do not match: " + "; ".join(result.errors))
