"""Exceptions raised by the range parser and the extractors"""


class CutError(Exception):
    """Base class for all rangecut errors"""

    pass


class RangeError(CutError, ValueError):
    """Raised when a range specification cannot be parsed.

    Args:
        token: The offending token, exactly as it appeared in the specification
        reason: Human readable description of what is wrong with it
    """

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid range '{token}' - {reason}")


class EmptyRangeListError(RangeError):
    """Raised when the specification holds no tokens at all"""

    def __init__(self, token: str = ""):
        super().__init__(token, "range list is empty")


class ZeroIndexError(RangeError):
    """Raised when a position is zero (positions are numbered from 1)"""

    def __init__(self, token: str):
        super().__init__(token, "number would be zero for non-zero type")


class InvalidDigitError(RangeError):
    """Raised when part of a token is not a number"""

    def __init__(self, token: str, part: str):
        self.part = part
        if part:
            reason = "invalid digit found in string"
        else:
            reason = "cannot parse integer from empty string"
        super().__init__(token, reason)


class MalformedRangeError(RangeError):
    """Raised when a token has more than one dash"""

    def __init__(self, token: str, part_count: int):
        self.part_count = part_count
        super().__init__(token, f"wrong number of range parts {part_count}")


class ExtractError(CutError):
    """Raised when a line cannot be extracted"""

    pass


class FieldSplitError(ExtractError):
    """Raised when a line cannot be split into delimited fields"""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Can't split line into fields - {reason}")


class DelimiterError(CutError, ValueError):
    """Raised for a field delimiter the record format cannot use"""

    pass
