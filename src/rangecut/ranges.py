"""Range specification parsing and position traversal.

A range specification is a comma separated list of one-based positions or
position ranges, e.g. "1,3-5" or "10-2". Each token becomes a zero-based,
inclusive ``RangeSpec``. Ranges keep the order they were given in and may run
backwards, overlap or repeat; all of that is reflected in the positions
produced by ``iter_positions``.

Examples:
    >>> parse_ranges("1,3-5")
    (RangeSpec(start=0, end=0), RangeSpec(start=2, end=4))
    >>> list(iter_positions(parse_ranges("3-1,2")))
    [2, 1, 0, 1]
"""

import re
from typing import NamedTuple, Optional, Sequence

from rangecut.errors import (
    EmptyRangeListError,
    InvalidDigitError,
    MalformedRangeError,
    ZeroIndexError,
)

# ASCII digits only, with an optional leading plus sign
_NUMBER_RE = re.compile(r"\+?[0-9]+")


class RangeSpec(NamedTuple):
    """Zero-based inclusive position range. ``start > end`` means descending."""

    start: int
    end: int

    @property
    def is_descending(self) -> bool:
        return self.start > self.end

    @property
    def size(self) -> int:
        """Number of positions the range covers."""
        return abs(self.end - self.start) + 1


RangeList = tuple[RangeSpec, ...]


def _parse_position(token: str, part: str) -> int:
    """Parse one side of a token into a positive one-based position."""
    if not _NUMBER_RE.fullmatch(part):
        raise InvalidDigitError(token, part)

    value = int(part)
    if value == 0:
        raise ZeroIndexError(token)

    return value


def parse_token(text: str) -> RangeSpec:
    """
    Parse a single range token into a zero-based RangeSpec.

    Args:
        text: Token such as "5", "1-3" or "10-2" (one-based, inclusive)

    Returns:
        RangeSpec with both endpoints shifted down by one

    Raises:
        InvalidDigitError: If a part is empty or not a number
        ZeroIndexError: If a part is zero
        MalformedRangeError: If the token has more than two parts

    Examples:
        >>> parse_token("5")
        RangeSpec(start=4, end=4)
        >>> parse_token("2-1")
        RangeSpec(start=1, end=0)
    """
    parts = text.split("-")

    # All parts are validated before the part count so "1-1-a" reports the bad digit
    positions = [_parse_position(text, part) for part in parts]

    if len(positions) == 1:
        return RangeSpec(positions[0] - 1, positions[0] - 1)
    if len(positions) == 2:
        return RangeSpec(positions[0] - 1, positions[1] - 1)

    raise MalformedRangeError(text, len(positions))


def parse_ranges(text: str) -> RangeList:
    """
    Parse a comma separated range specification.

    Tokens are kept in order with no sorting or de-duplication, so "3,1,3"
    visits position 3 twice. The first invalid token aborts the whole parse.

    Args:
        text: Specification such as "1,3-5" or "15, 19-20"

    Returns:
        Tuple of RangeSpec in specification order

    Raises:
        EmptyRangeListError: If the specification is blank
        RangeError: Any error raised by parse_token for the first bad token

    Examples:
        >>> parse_ranges("15,19-20")
        (RangeSpec(start=14, end=14), RangeSpec(start=18, end=19))
    """
    if not text or not text.strip():
        raise EmptyRangeListError(text)

    return tuple(parse_token(token.strip()) for token in text.split(","))


class RangeIterator:
    """Lazily walks the positions of a range list.

    The iterator keeps a cursor into the range list and an optional cursor
    inside the current range. Ranges are never expanded up front, so a range
    like "1-1000000000" costs no more memory than "1-2".
    """

    def __init__(self, ranges: Sequence[tuple[int, int]]):
        self._ranges = ranges
        self._range_pos = 0
        self._index: Optional[int] = None

    def __iter__(self) -> "RangeIterator":
        return self

    def __next__(self) -> int:
        if self._range_pos >= len(self._ranges):
            raise StopIteration

        start, end = self._ranges[self._range_pos]
        if self._index is None:
            self._index = start

        value = self._index
        if value == end:
            self._range_pos += 1
            self._index = None
        elif start <= end:
            self._index = value + 1
        else:
            self._index = value - 1

        return value


def iter_positions(ranges: Sequence[tuple[int, int]]) -> RangeIterator:
    """Return a fresh iterator over the zero-based positions of ``ranges``."""
    return RangeIterator(ranges)
