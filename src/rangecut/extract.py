"""Per-line extraction entry points"""

from typing import Iterable, Iterator

from rangecut.lines import chomp
from rangecut.modes import ExtractionMode


def extract(mode: ExtractionMode, line: str) -> str:
    """
    Extract the selected part of a single line.

    Args:
        mode: Active extraction mode
        line: Input line, without its line terminator

    Returns:
        Extracted text (without a line terminator)

    Raises:
        FieldSplitError: Field mode only, if the line's quoting is malformed
    """
    return mode.extract(line)


def extract_lines(mode: ExtractionMode, lines: Iterable[str]) -> Iterator[str]:
    """
    Lazily extract every line of an iterable such as an open file.

    One line terminator is removed from each line before extraction. Lines
    are independent, so callers may split the input across workers freely.

    Example:
        mode = CharMode(parse_ranges("1-10"))
        with open("notes.txt") as f:
            for text in extract_lines(mode, f):
                print(text)
    """
    for line in lines:
        yield mode.extract(chomp(line))
