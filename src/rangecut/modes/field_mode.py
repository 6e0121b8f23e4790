"""Delimited field extraction"""

from typing import Sequence

from rangecut.fields import check_delimiter, join_fields, select_fields, split_fields
from rangecut.modes.base import ExtractionMode

DEFAULT_DELIMITER = "\t"


def extract_fields(line: str, delimiter: str, ranges: Sequence[tuple[int, int]]) -> str:
    """
    Extract delimited fields of the line and join them with the same delimiter.

    Args:
        line: Input line
        delimiter: Field separator, used for both splitting and joining
        ranges: Zero-based field ranges

    Returns:
        Selected fields as one record, re-quoted where needed

    Raises:
        FieldSplitError: If the line's quoting is malformed

    Examples:
        >>> extract_fields("Captain,Sham,12345", ",", [(1, 1), (0, 0)])
        'Sham,Captain'
    """
    record = split_fields(line, delimiter)
    return join_fields(select_fields(record, ranges), delimiter)


class FieldMode(ExtractionMode):
    """Select delimiter separated fields"""

    name = "fields"

    def __init__(self, ranges: Sequence[tuple[int, int]], delimiter: str = DEFAULT_DELIMITER):
        super().__init__(ranges)
        self._delimiter = check_delimiter(delimiter)

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def extract(self, line: str) -> str:
        return extract_fields(line, self._delimiter, self._ranges)

    def _key(self) -> tuple:
        return (self.name, self._ranges, self._delimiter)

    def __repr__(self) -> str:
        ranges = ", ".join(f"({r.start}, {r.end})" for r in self._ranges)
        return f"FieldMode([{ranges}], delimiter={self._delimiter!r})"
