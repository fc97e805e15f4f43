from __future__ import annotations

from .api import resolve
from .errors import IndexOutOfRangeError, InvalidIndexError, PositionError
from .position import Options, Position

__all__ = [
    "IndexOutOfRangeError",
    "InvalidIndexError",
    "Options",
    "Position",
    "PositionError",
    "resolve",
]
