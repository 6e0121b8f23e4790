#!/usr/bin/env python

"""Command-line interface for rangecut"""

import argparse
import sys
from contextlib import nullcontext
from typing import Optional

from rangecut import __version__
from rangecut.errors import DelimiterError, FieldSplitError, RangeError
from rangecut.extract import extract
from rangecut.lines import chomp
from rangecut.modes import DEFAULT_DELIMITER, ExtractionMode, create_mode
from rangecut.ranges import RangeList, parse_ranges


class Config:
    """Settings for one run of the tool.

    Args:
        files: Input paths, "-" meaning stdin
        mode: The single active extraction mode
        verbose: Print progress to stderr
    """

    def __init__(self, files: list[str], mode: ExtractionMode, verbose: bool = False):
        self.files = files
        self.mode = mode
        self.verbose = verbose

    def __repr__(self) -> str:
        return f"Config(files={self.files!r}, mode={self.mode!r}, verbose={self.verbose})"


def _range_list(text: str) -> RangeList:
    """argparse type for range specifications."""
    try:
        return parse_ranges(text)
    except RangeError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _create_parser():
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="rangecut",
        description="Extract bytes, characters or fields from each line of text",
        epilog="Ranges are one-based and kept in order, e.g. '1,3-5' or '5-1'",
    )
    parser.add_argument("files", nargs="*", default=["-"], help="input files (default: stdin, also -)")

    # Exactly one selection mode per run
    selection = parser.add_mutually_exclusive_group(required=True)
    selection.add_argument("-b", "--bytes", type=_range_list, metavar="LIST", help="byte ranges to extract, e.g. 1,3-5")
    selection.add_argument("-c", "--chars", type=_range_list, metavar="LIST", help="char ranges to extract, e.g. 5-1,2")
    selection.add_argument("-f", "--fields", type=_range_list, metavar="LIST", help="field ranges to extract, e.g. 1,3")

    parser.add_argument(
        "-d", "--delimiter", type=str, default=DEFAULT_DELIMITER, help="field delimiter (default: tab)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_config(argv: Optional[list[str]] = None) -> Config:
    """Parse command-line arguments into a Config.

    Invalid range lists and delimiters are reported by argparse, which exits
    with status 2.
    """
    parser = _create_parser()
    args = parser.parse_args(argv)

    if args.bytes is not None:
        kind, ranges = "bytes", args.bytes
    elif args.chars is not None:
        kind, ranges = "chars", args.chars
    else:
        kind, ranges = "fields", args.fields

    try:
        mode = create_mode(kind, ranges, delimiter=args.delimiter)
    except DelimiterError as e:
        parser.error(str(e))

    return Config(files=args.files, mode=mode, verbose=args.verbose)


def _open(path: str):
    """Open an input path for reading; "-" is stdin (left open afterwards).

    Only "\\n" ends a line, and undecodable bytes are kept as surrogate
    escapes so that a bad line can be reported without losing the rest.
    """
    if path == "-":
        return nullcontext(sys.stdin)
    return open(path, encoding="utf-8", errors="surrogateescape", newline="")


def _process_file(path: str, infile, outfile, config: Config) -> int:
    """Extract every line of one input file.

    Lines that are not valid UTF-8 are reported and skipped.

    Returns:
        Number of lines processed
    """
    line_count = 0
    for line_no, line in enumerate(infile, 1):
        try:
            line.encode("utf-8")
        except UnicodeEncodeError:
            print(f"Can't read line {line_no} from file '{path}', error invalid UTF-8", file=sys.stderr)
            continue

        print(extract(config.mode, chomp(line)), file=outfile)
        line_count += 1
    return line_count


def run(config: Config, outfile=None) -> int:
    """Process all input files.

    Files that cannot be opened are reported and skipped, as are lines that
    are not valid UTF-8. A line that cannot be split into fields ends the run.

    Returns:
        Exit status: 0 on success, 1 after a field error
    """
    outfile = outfile or sys.stdout

    if config.verbose:
        print(f"Mode: {config.mode!r}", file=sys.stderr)

    for input_source in config.files:
        try:
            source = _open(input_source)
        except OSError as e:
            print(f"Can't open file '{input_source}', error {e.strerror or e}", file=sys.stderr)
            continue

        if config.verbose:
            print(f"Processing: {'stdin' if input_source == '-' else input_source}", file=sys.stderr)

        try:
            with source as infile:
                lines = _process_file(input_source, infile, outfile, config)
        except FieldSplitError as e:
            print(f"{input_source}: {e}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            # stdin decodes strictly, so the stream cannot be resumed
            print(f"Can't read from '{input_source}', error {e}; rest of input skipped", file=sys.stderr)
            continue

        if config.verbose:
            print(f"Processed {lines} lines", file=sys.stderr)

    return 0


def main() -> None:
    """Main entry point for the rangecut command-line tool"""
    sys.exit(run(get_config()))


if __name__ == "__main__":
    main()
