"""Base class for extraction modes"""

from abc import ABC, abstractmethod
from typing import Sequence

from rangecut.ranges import RangeList, RangeSpec


class ExtractionMode(ABC):
    """Base class for the ways a line can be cut.

    A mode pairs a range list with an addressing unit (byte, character or
    field). Exactly one mode drives a run; modes are immutable and carry no
    per-line state, so one instance can be shared across lines and workers.
    """

    name = ""

    def __init__(self, ranges: Sequence[tuple[int, int]]):
        self._ranges: RangeList = tuple(RangeSpec(*r) for r in ranges)
        for spec in self._ranges:
            if spec.start < 0 or spec.end < 0:
                raise ValueError(f"Range positions must be zero-based and non-negative, got {tuple(spec)}")

    @property
    def ranges(self) -> RangeList:
        return self._ranges

    @abstractmethod
    def extract(self, line: str) -> str:
        """Select the positions of ``line`` covered by the range list.

        Args:
            line: One input line, without its line terminator

        Returns:
            The selected bytes, characters or fields rendered as text
        """
        pass

    def _key(self) -> tuple:
        return (self.name, self._ranges)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExtractionMode):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        ranges = ", ".join(f"({r.start}, {r.end})" for r in self._ranges)
        return f"{type(self).__name__}([{ranges}])"
