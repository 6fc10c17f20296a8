"""Data models for the stgseries series module.

Contains:
- PatchRecord: Pydantic model for one entry of a patch series
- TagStyle: Visual attributes for one style tag
- Theme: Mapping of style tags to visual attributes
"""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict

from stgseries.series.constants import PatchState, StyleTag


class PatchRecord(BaseModel):
    """One patch of a `stg series` listing.

    Attributes:
        name: Patch name, unique within one listing.
        state: Current, applied, unapplied or hidden.
        is_empty: Whether the patch introduces no changes.
        is_marked: Whether the patch is the caller's marked patch.
        description: First line of the patch's commit message.
        empty_flag: Raw empty-flag character as printed by stg.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    state: PatchState
    is_empty: bool = False
    is_marked: bool = False
    description: str = ""
    empty_flag: str = " "


RenderToken = tuple[str, StyleTag]


@dataclass(frozen=True)
class TagStyle:
    """Visual attributes for one style tag."""

    fg: Optional[str] = None
    bold: bool = False
    dim: bool = False


def _default_styles() -> dict[StyleTag, TagStyle]:
    return {
        StyleTag.CURRENT: TagStyle(fg="yellow", bold=True),
        StyleTag.APPLIED: TagStyle(fg="green"),
        StyleTag.UNAPPLIED: TagStyle(fg="red"),
        StyleTag.HIDDEN: TagStyle(dim=True),
        StyleTag.MARKED: TagStyle(fg="magenta", bold=True),
        StyleTag.UNMARKED: TagStyle(),
        StyleTag.EMPTY: TagStyle(fg="cyan"),
        StyleTag.PATCH: TagStyle(bold=True),
        StyleTag.DESCRIPTION: TagStyle(),
    }


@dataclass
class Theme:
    """Mapping of style tags to visual attributes."""

    styles: dict[StyleTag, TagStyle] = field(default_factory=_default_styles)

    def style_for(self, tag: StyleTag) -> TagStyle:
        """Return the style for a tag, or a plain style if unmapped."""
        return self.styles.get(tag, TagStyle())
