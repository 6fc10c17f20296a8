"""Patch series parsing and rendering for stgseries.

This package provides:
- constants: PatchState, StyleTag, STATE_FLAGS, STATE_TAGS
- exceptions: ParseError, ParseErrorKind
- models: PatchRecord, RenderToken, TagStyle, Theme
- parser: parse_patch_line, parse_series
- renderer: render_patch, format_tokens
- config: load_theme_from_dict
"""

# Constants
from stgseries.series.constants import (
    STATE_FLAGS,
    STATE_TAGS,
    PatchState,
    StyleTag,
)

# Exceptions
from stgseries.series.exceptions import (
    ParseError,
    ParseErrorKind,
)

# Models
from stgseries.series.models import (
    PatchRecord,
    RenderToken,
    TagStyle,
    Theme,
)

# Parsing
from stgseries.series.parser import (
    parse_patch_line,
    parse_series,
)

# Rendering
from stgseries.series.renderer import (
    format_tokens,
    render_patch,
)

# Theme configuration
from stgseries.series.config import (
    load_theme_from_dict,
)


__all__ = [
    # Constants
    "STATE_FLAGS",
    "STATE_TAGS",
    "PatchState",
    "StyleTag",
    # Exceptions
    "ParseError",
    "ParseErrorKind",
    # Models
    "PatchRecord",
    "RenderToken",
    "TagStyle",
    "Theme",
    # Parsing
    "parse_patch_line",
    "parse_series",
    # Rendering
    "format_tokens",
    "render_patch",
    # Config
    "load_theme_from_dict",
]
