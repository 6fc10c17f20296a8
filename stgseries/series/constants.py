"""Constants for the stgseries series module.

Contains:
- PatchState: The four states a patch can be in
- StyleTag: Style tags attached to rendered tokens
- STATE_FLAGS: Mapping of `stg series` state flag characters to states
- STATE_TAGS: Style tag used for each state's flag glyph
"""

from enum import Enum


class PatchState(Enum):
    """States reported by `stg series` for each patch."""

    CURRENT = "current"
    APPLIED = "applied"
    UNAPPLIED = "unapplied"
    HIDDEN = "hidden"


class StyleTag(Enum):
    """Style tags for rendered patch tokens.

    Callers map these to concrete visual attributes (see Theme).
    """

    CURRENT = "current"
    APPLIED = "applied"
    UNAPPLIED = "unapplied"
    HIDDEN = "hidden"
    MARKED = "marked"
    UNMARKED = "unmarked"
    EMPTY = "empty"
    PATCH = "patch"
    DESCRIPTION = "description"


# Exhaustive flag table; anything else is an UnknownState parse error
STATE_FLAGS = {
    ">": PatchState.CURRENT,
    "+": PatchState.APPLIED,
    "-": PatchState.UNAPPLIED,
    "!": PatchState.HIDDEN,
}

# Reverse lookup used when rendering
STATE_GLYPHS = {state: flag for flag, state in STATE_FLAGS.items()}

STATE_TAGS = {
    PatchState.CURRENT: StyleTag.CURRENT,
    PatchState.APPLIED: StyleTag.APPLIED,
    PatchState.UNAPPLIED: StyleTag.UNAPPLIED,
    PatchState.HIDDEN: StyleTag.HIDDEN,
}

MARKER_GLYPH = "<"
UNMARKED_GLYPH = " "
