"""Character position extraction"""

from typing import Sequence

from rangecut.modes.base import ExtractionMode
from rangecut.ranges import iter_positions


def extract_chars(line: str, ranges: Sequence[tuple[int, int]]) -> str:
    """
    Extract characters (code points) of the line in traversal order.

    Examples:
        >>> extract_chars("ábc", [(2, 2), (1, 1)])
        'cb'
    """
    count = len(line)
    return "".join(line[i] for i in iter_positions(ranges) if 0 <= i < count)


class CharMode(ExtractionMode):
    """Select character positions"""

    name = "chars"

    def extract(self, line: str) -> str:
        return extract_chars(line, self._ranges)
