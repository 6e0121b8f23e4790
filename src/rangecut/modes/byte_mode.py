"""Byte position extraction"""

from typing import Sequence

from rangecut.modes.base import ExtractionMode
from rangecut.ranges import iter_positions


def extract_bytes(line: str, ranges: Sequence[tuple[int, int]]) -> str:
    """
    Extract bytes of the UTF-8 encoded line.

    Positions past the end of the line are skipped. Selecting part of a
    multi-byte character leaves invalid UTF-8, which is decoded as U+FFFD.

    Examples:
        >>> extract_bytes("ábc", [(0, 1)])
        'á'
        >>> extract_bytes("ábc", [(0, 0)])
        '�'
    """
    data = line.encode("utf-8")
    count = len(data)
    selected = bytes(data[i] for i in iter_positions(ranges) if 0 <= i < count)
    return selected.decode("utf-8", errors="replace")


class ByteMode(ExtractionMode):
    """Select byte positions"""

    name = "bytes"

    def extract(self, line: str) -> str:
        return extract_bytes(line, self._ranges)
