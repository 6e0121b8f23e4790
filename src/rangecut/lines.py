"""Line terminator handling"""


def chomp(line: str) -> str:
    """
    Remove one line terminator: a trailing "\\n" and the "\\r" right before it.

    Other carriage returns are part of the line and are kept.

    Examples:
        >>> chomp("abc\\r\\n")
        'abc'
        >>> chomp("abc\\r\\r\\n")
        'abc\\r'
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
