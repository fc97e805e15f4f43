from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class PositionError(Exception):
    index: object
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message


@dataclass(eq=False)
class InvalidIndexError(PositionError, TypeError):
    """The index is not a whole number."""


@dataclass(eq=False)
class IndexOutOfRangeError(PositionError, IndexError):
    """The index does not point inside the text."""

    length: int = 0
