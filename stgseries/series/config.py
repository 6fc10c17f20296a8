"""Configuration utilities for series themes.

Contains functions for:
- Loading a Theme from a configuration dictionary
"""

from stgseries.series.constants import StyleTag
from stgseries.series.models import TagStyle, Theme


def load_theme_from_dict(config_dict: dict) -> Theme:
    """Load a Theme from a configuration dictionary.

    Entries under the `theme` key override the defaults tag by tag.
    Unknown tag names are ignored.

    Example:
        theme:
          current: {fg: blue, bold: true}
          hidden: {dim: true}

    Args:
        config_dict: Dictionary with a `theme` section.

    Returns:
        Theme instance.
    """
    theme = Theme()
    theme_section = config_dict.get("theme") or {}

    for tag_name, style_dict in theme_section.items():
        try:
            tag = StyleTag(str(tag_name).lower())
        except ValueError:
            continue
        style_dict = style_dict or {}
        theme.styles[tag] = TagStyle(
            fg=style_dict.get("fg"),
            bold=bool(style_dict.get("bold", False)),
            dim=bool(style_dict.get("dim", False)),
        )

    return theme

