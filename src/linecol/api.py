from __future__ import annotations

import logging
import math
import numbers

from .errors import IndexOutOfRangeError, InvalidIndexError
from .position import Options, Position


logger = logging.getLogger(__name__)

_LINE_BREAK = "\n"


def _last_break_at_or_before(text: str, start: int) -> int:
    """Position of the last line-break in text[0:start + 1], or -1.

    A negative start means nothing precedes it; it must not wrap around to
    a scan from position 0.
    """
    if start < 0:
        return -1
    return text.rfind(_LINE_BREAK, 0, start + 1)


def _as_index(index: object) -> int:
    if isinstance(index, bool) or not isinstance(index, numbers.Real):
        raise _invalid(index)
    if isinstance(index, numbers.Integral):
        return int(index)
    if isinstance(index, numbers.Rational):
        # Exact; float() would round or overflow.
        if index.denominator != 1:
            raise _invalid(index)
        return int(index.numerator)
    try:
        value = float(index)
    except OverflowError:
        raise _invalid(index) from None
    if not math.isfinite(value) or not value.is_integer():
        raise _invalid(index)
    return int(value)


def _invalid(index: object) -> InvalidIndexError:
    logger.debug("rejecting non-integer index %r", index)
    return InvalidIndexError(
        index=index,
        message=f"index must be an integer, got {index!r}",
    )


def _check_bounds(text: str, index: int) -> None:
    length = len(text)
    # Empty text allows exactly index 0.
    if index < 0 or (length > 0 and index >= length) or (length == 0 and index != 0):
        logger.debug("index %d out of bounds for length %d", index, length)
        hint = "index must not be negative" if index < 0 else f"valid indices are 0..{max(length - 1, 0)}"
        raise IndexOutOfRangeError(
            index=index,
            message=f"index {index} out of bounds for text of length {length}",
            hint=hint,
            length=length,
        )


def _locate(text: str, index: int) -> Position:
    break_before = _last_break_at_or_before(text, index - 1)
    column = index - break_before - 1

    line = 0
    i = break_before
    while i >= 0:
        line += 1
        i = _last_break_at_or_before(text, i - 1)

    return Position(line=line, column=column)


def resolve(
    text: str,
    index: int,
    options: Options | None = None,
    *,
    one_based: bool | None = None,
) -> Position:
    """Convert an offset into ``text`` to its line and column.

    ``options.one_based`` (or the ``one_based`` keyword, which wins when
    given) switches both fields to start at 1.

    >>> resolve("Hello\\nWorld", 7)
    Position(line=1, column=1)
    >>> resolve("Hello\\nWorld", 7, one_based=True)
    Position(line=2, column=2)

    Raises InvalidIndexError for a non-integer index and
    IndexOutOfRangeError for an index outside the text.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    i = _as_index(index)
    _check_bounds(text, i)

    if one_based is None:
        one_based = (options or Options()).one_based

    pos = _locate(text, i)
    return pos.shifted(1) if one_based else pos
