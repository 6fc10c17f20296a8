"""Renderer turning patch records into styled display tokens.

Contains:
- render_patch: Build the ordered token list for one record
- format_tokens: Join tokens into a single (optionally coloured) line
"""

import typer

from stgseries.series.constants import (
    MARKER_GLYPH,
    STATE_GLYPHS,
    STATE_TAGS,
    UNMARKED_GLYPH,
    StyleTag,
)
from stgseries.series.models import PatchRecord, RenderToken, Theme


def render_patch(record: PatchRecord) -> list[RenderToken]:
    """Render a patch record as (text, style tag) tokens.

    Tokens, in order: state flag, marker, empty flag, name, description.
    The marker is a blank of the same width when the patch is not marked,
    so columns line up across records.

    Args:
        record: The patch to render.

    Returns:
        List of five (text, StyleTag) tuples.
    """
    if record.is_marked:
        marker = (MARKER_GLYPH, StyleTag.MARKED)
    else:
        marker = (UNMARKED_GLYPH, StyleTag.UNMARKED)

    return [
        (STATE_GLYPHS[record.state], STATE_TAGS[record.state]),
        marker,
        (record.empty_flag, StyleTag.EMPTY),
        (record.name, StyleTag.PATCH),
        (record.description, StyleTag.DESCRIPTION),
    ]


def _style_text(text: str, tag: StyleTag, theme: Theme) -> str:
    style = theme.style_for(tag)
    if not text.strip() or (style.fg is None and not style.bold and not style.dim):
        return text
    return typer.style(text, fg=style.fg, bold=style.bold or None, dim=style.dim or None)


def format_tokens(
    tokens: list[RenderToken],
    theme: Theme,
    name_width: int = 0,
    color: bool = True,
) -> str:
    """Join rendered tokens into one display line.

    The three flag columns are printed back to back, followed by the name
    padded to name_width and then the description.

    Args:
        tokens: Output of render_patch.
        theme: Theme used to map style tags to ANSI styles.
        name_width: Column width for the patch name.
        color: Whether to emit ANSI styling.

    Returns:
        The formatted line.
    """
    (state, state_tag), (marker, marker_tag), (empty, empty_tag), (name, name_tag), (desc, desc_tag) = tokens

    # Pad before styling so escape codes don't count towards the width
    padded_name = name.ljust(name_width)

    if not color:
        return f"{state}{marker}{empty} {padded_name} {desc}".rstrip()

    parts = [
        _style_text(state, state_tag, theme),
        _style_text(marker, marker_tag, theme),
        _style_text(empty, empty_tag, theme),
        " ",
        _style_text(name, name_tag, theme) + padded_name[len(name):],
        " ",
        _style_text(desc, desc_tag, theme),
    ]
    return "".join(parts).rstrip()
