#!/usr/bin/env python
"""
Example: reorder and repeat CSV columns with rangecut.

Shows how to:
1. Parse a range specification once
2. Reuse one extraction mode for every line
3. Handle malformed lines without stopping the whole file

Usage:
    python reorder_columns_example.py data.csv "3,1-2"
"""

import sys

from rangecut import FieldMode, FieldSplitError, RangeError, extract, parse_ranges


def main():
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)

    path, spec = sys.argv[1], sys.argv[2]

    try:
        mode = FieldMode(parse_ranges(spec), delimiter=",")
    except RangeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Selecting fields {spec} ({len(mode.ranges)} ranges)", file=sys.stderr)

    bad_lines = 0
    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            try:
                print(extract(mode, line.rstrip("\n")))
            except FieldSplitError as e:
                bad_lines += 1
                print(f"line {line_no}: {e}", file=sys.stderr)

    if bad_lines:
        print(f"Skipped {bad_lines} malformed lines", file=sys.stderr)


if __name__ == "__main__":
    main()
