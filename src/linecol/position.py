from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A line/column position inside a text.

    Both fields are 0-based unless produced in one-based mode.
    """

    line: int
    column: int

    def shifted(self, delta: int) -> Position:
        return Position(line=self.line + delta, column=self.column + delta)


@dataclass(frozen=True, slots=True)
class Options:
    one_based: bool = False
