"""Extraction modes

Exactly one mode is active per run:
- Bytes: positions address bytes of the UTF-8 encoded line
- Chars: positions address Unicode characters
- Fields: positions address delimiter separated, optionally quoted fields
"""

from typing import Sequence

from rangecut.modes.base import ExtractionMode
from rangecut.modes.byte_mode import ByteMode, extract_bytes
from rangecut.modes.char_mode import CharMode, extract_chars
from rangecut.modes.field_mode import DEFAULT_DELIMITER, FieldMode, extract_fields

__all__ = [
    "ByteMode",
    "CharMode",
    "DEFAULT_DELIMITER",
    "ExtractionMode",
    "FieldMode",
    "MODE_NAMES",
    "create_mode",
    "extract_bytes",
    "extract_chars",
    "extract_fields",
]

MODE_NAMES = ("bytes", "chars", "fields")


def create_mode(kind: str, ranges: Sequence[tuple[int, int]], delimiter: str = DEFAULT_DELIMITER) -> ExtractionMode:
    """Factory function to create an extraction mode.

    Args:
        kind: Mode name ('bytes', 'chars' or 'fields')
        ranges: Parsed range list
        delimiter: Field delimiter, only used by 'fields'

    Returns:
        The matching ExtractionMode instance

    Examples:
        >>> mode = create_mode("chars", [(0, 2)])
        >>> mode = create_mode("fields", [(1, 1), (0, 0)], delimiter=",")
    """
    if kind == "bytes":
        return ByteMode(ranges)

    elif kind == "chars":
        return CharMode(ranges)

    elif kind == "fields":
        return FieldMode(ranges, delimiter)

    else:
        raise ValueError(f"Unknown extraction mode: {kind}")
