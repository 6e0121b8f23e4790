"""Delimiter separated field splitting and joining.

Lines are parsed as a single CSV-style record: a field may be wrapped in
double quotes to hold the delimiter or a quote, and a doubled quote inside a
quoted field stands for one literal quote. Joining applies the same rules in
reverse, quoting only the fields that need it.
"""

import csv
import io
import sys
from typing import Sequence

from rangecut.errors import DelimiterError, FieldSplitError
from rangecut.lines import chomp
from rangecut.ranges import iter_positions

QUOTE_CHAR = '"'


def _raise_field_size_limit() -> int:
    """Lift the csv module's per-field size limit as far as the platform allows."""
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return limit
        except OverflowError:
            limit //= 2


FIELD_SIZE_LIMIT = _raise_field_size_limit()


def check_delimiter(delimiter: str) -> str:
    """
    Validate a field delimiter.

    Args:
        delimiter: Candidate delimiter

    Returns:
        The delimiter unchanged

    Raises:
        DelimiterError: If it is not a single character usable as a separator
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise DelimiterError(f"Delimiter must be a single character, got {delimiter!r}")
    if delimiter in (QUOTE_CHAR, "\r", "\n"):
        raise DelimiterError(f"Delimiter {delimiter!r} cannot be used to separate fields")
    return delimiter


def split_fields(line: str, delimiter: str) -> list[str]:
    """
    Split one line into its fields.

    Args:
        line: Input line, with or without its trailing newline
        delimiter: Field separator character

    Returns:
        List of field values with quoting removed; empty for an empty line

    Raises:
        FieldSplitError: If the quoting is malformed (e.g. an unterminated quote)
    """
    text = chomp(line)
    reader = csv.reader([text], delimiter=delimiter, quotechar=QUOTE_CHAR, doublequote=True, strict=True)
    try:
        return next(reader, [])
    except csv.Error as e:
        raise FieldSplitError(line, str(e)) from e


def select_fields(record: Sequence[str], ranges: Sequence[tuple[int, int]]) -> list[str]:
    """Pick fields in traversal order, skipping positions outside the record."""
    count = len(record)
    return [record[i] for i in iter_positions(ranges) if 0 <= i < count]


def join_fields(fields: Sequence[str], delimiter: str) -> str:
    """
    Serialize fields back into a single delimited record.

    Fields holding the delimiter, a quote or a line break are quoted. The
    record terminator added by the writer is removed; the caller ends the line.
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=delimiter,
        quotechar=QUOTE_CHAR,
        doublequote=True,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    writer.writerow(fields)
    return buffer.getvalue()[:-1]
