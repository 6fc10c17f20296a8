"""Series parsing exception classes.

Contains:
- ParseErrorKind: The two ways a series line can fail to parse
- ParseError: Raised for a line that cannot be turned into a PatchRecord
"""

from enum import Enum
from typing import Optional


class ParseErrorKind(Enum):
    """Kinds of series parse failures."""

    MALFORMED_LINE = "malformed_line"
    UNKNOWN_STATE = "unknown_state"


class ParseError(Exception):
    """Raised when a `stg series` line cannot be parsed.

    Attributes:
        kind: Which check failed.
        line: The offending line.
        flag: The unrecognised state flag (UNKNOWN_STATE only).
    """

    def __init__(self, kind: ParseErrorKind, line: str, flag: Optional[str] = None):
        self.kind = kind
        self.line = line
        self.flag = flag
        if kind == ParseErrorKind.UNKNOWN_STATE:
            message = f"Unknown stgit patch state: {flag!r} in line {line!r}"
        else:
            message = f"Malformed series line: {line!r}"
        super().__init__(message)
