"""Parser for `stg series --all --description --empty` output.

Each line of the listing has the form:

    <empty-flag><state-flag>[ ]<name> # <description>

The space between the state flag and the name is optional. `stg` pads
names to a common width, so any number of spaces may precede the `#`. A line ending right after the `#` has an empty
description.

Contains:
- parse_patch_line: Parse one line into a PatchRecord
- parse_series: Lazily parse a whole listing
"""

import re
from typing import Iterator, Optional

from stgseries.series.constants import STATE_FLAGS
from stgseries.series.exceptions import ParseError, ParseErrorKind
from stgseries.series.models import PatchRecord


SERIES_LINE_RE = re.compile(
    r"^(?P<empty_flag>.)(?P<state_flag>.) ?(?P<name>\S+) +#(?: (?P<description>.*))?$"
)


def parse_patch_line(line: str) -> PatchRecord:
    """Parse a single series line into a PatchRecord.

    The returned record is never marked; marking is applied by parse_series.

    Args:
        line: One line of `stg series` output, without the trailing newline.

    Returns:
        The parsed PatchRecord.

    Raises:
        ParseError: If the line does not match the series format, or if its
            state flag is not one of `>`, `+`, `-`, `!`.
    """
    match = SERIES_LINE_RE.match(line)
    if match is None:
        raise ParseError(ParseErrorKind.MALFORMED_LINE, line)

    state_flag = match.group("state_flag")
    state = STATE_FLAGS.get(state_flag)
    if state is None:
        raise ParseError(ParseErrorKind.UNKNOWN_STATE, line, flag=state_flag)

    empty_flag = match.group("empty_flag")
    return PatchRecord(
        name=match.group("name"),
        state=state,
        is_empty=empty_flag != " ",
        description=match.group("description") or "",
        empty_flag=empty_flag,
    )


def parse_series(raw_text: str, marked_patch: Optional[str] = None) -> Iterator[PatchRecord]:
    """Parse a full series listing, yielding records in stack order.

    Blank lines are skipped. The first unparseable line raises and ends
    the iteration; no records after it are produced.

    Args:
        raw_text: Captured stdout of the series command.
        marked_patch: Name of the caller's marked patch, if any.

    Yields:
        PatchRecord for each line, with is_marked set from marked_patch.

    Raises:
        ParseError: On the first malformed line or unknown state flag.
    """
    for line in raw_text.splitlines():
        if not line.strip():
            continue
        record = parse_patch_line(line)
        if marked_patch is not None and record.name == marked_patch:
            record = record.model_copy(update={"is_marked": True})
        yield record
