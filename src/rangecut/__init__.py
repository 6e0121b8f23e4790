"""rangecut - select bytes, characters or fields from each line of text

Positions are given as a range specification such as "1,3-5" or "10-2".
Ranges are visited in the order written, may overlap or repeat, and run
backwards when the start is larger than the end.

Library Usage:
    from rangecut import FieldMode, extract, parse_ranges

    mode = FieldMode(parse_ranges("3,1"), delimiter=",")
    extract(mode, "Captain,Sham,12345")  # "12345,Captain"

Command Line Usage:
    rangecut -c 1-10 notes.txt
    rangecut -b 5-1 notes.txt
    rangecut -f 2,1 -d , data.csv
    cat data.tsv | rangecut -f 3
"""

from rangecut.errors import (
    CutError,
    DelimiterError,
    EmptyRangeListError,
    ExtractError,
    FieldSplitError,
    InvalidDigitError,
    MalformedRangeError,
    RangeError,
    ZeroIndexError,
)
from rangecut.extract import extract, extract_lines
from rangecut.fields import join_fields, select_fields, split_fields
from rangecut.modes import (
    ByteMode,
    CharMode,
    ExtractionMode,
    FieldMode,
    create_mode,
    extract_bytes,
    extract_chars,
    extract_fields,
)
from rangecut.ranges import RangeIterator, RangeList, RangeSpec, iter_positions, parse_ranges, parse_token

__version__ = "1.0.0"
__all__ = [
    "ByteMode",
    "CharMode",
    "CutError",
    "DelimiterError",
    "EmptyRangeListError",
    "ExtractError",
    "ExtractionMode",
    "FieldMode",
    "FieldSplitError",
    "InvalidDigitError",
    "MalformedRangeError",
    "RangeError",
    "RangeIterator",
    "RangeList",
    "RangeSpec",
    "ZeroIndexError",
    "create_mode",
    "extract",
    "extract_bytes",
    "extract_chars",
    "extract_fields",
    "extract_lines",
    "iter_positions",
    "join_fields",
    "parse_ranges",
    "parse_token",
    "select_fields",
    "split_fields",
]
