"""Series view: the caller-owned state around a rendered patch series.

A SeriesView keeps the marked patch and the last successfully parsed
series. Refreshing parses the new listing completely before replacing the
snapshot, so a parse error leaves the previous records in place.
"""

from typing import Optional

from stgseries.series import (
    PatchRecord,
    Theme,
    format_tokens,
    parse_series,
    render_patch,
)
from stgseries.stg.exceptions import NoPatchSelectedError, UnknownPatchError


class SeriesView:
    """The patch series as shown to the user.

    Attributes:
        marked_patch: The single marked patch name, or None.
        records: Records of the last successful refresh, in stack order.
    """

    def __init__(self, marked_patch: Optional[str] = None):
        self.marked_patch = marked_patch
        self.records: list[PatchRecord] = []

    def refresh(self, raw_text: str) -> list[PatchRecord]:
        """Rebuild the series from a fresh listing.

        Args:
            raw_text: Output of the series command.

        Returns:
            The new records.

        Raises:
            ParseError: If any line fails to parse. The previous records
                are kept.
        """
        records = list(parse_series(raw_text, self.marked_patch))
        self.records = records
        return records

    def mark(self, name: str) -> None:
        """Mark a patch, replacing any previous mark."""
        self.marked_patch = name
        self._apply_mark()

    def unmark(self) -> None:
        """Clear the mark."""
        self.marked_patch = None
        self._apply_mark()

    def _apply_mark(self) -> None:
        self.records = [
            record.model_copy(update={"is_marked": record.name == self.marked_patch})
            for record in self.records
        ]

    def names(self) -> list[str]:
        return [record.name for record in self.records]

    def resolve_target(self, name: Optional[str], known_names: Optional[list[str]] = None) -> str:
        """Pick the patch an action applies to.

        An explicit name wins; otherwise the marked patch is used.

        Args:
            name: Patch name given by the user, if any.
            known_names: Valid patch names. Defaults to the view's records.

        Returns:
            The patch name.

        Raises:
            NoPatchSelectedError: If no name was given and nothing is marked.
            UnknownPatchError: If the patch is not in the series.
        """
        target = name or self.marked_patch
        if not target:
            raise NoPatchSelectedError("No patch given and no patch is marked.")
        if known_names is None:
            known_names = self.names()
        if target not in known_names:
            raise UnknownPatchError(f"No such patch: {target}")
        return target

    def render(self, theme: Optional[Theme] = None, color: bool = True) -> list[str]:
        """Render all records as display lines with aligned name columns.

        Args:
            theme: Theme for styling. Defaults to the built-in theme.
            color: Whether to emit ANSI styling.

        Returns:
            One line per record.
        """
        theme = theme or Theme()
        name_width = max((len(record.name) for record in self.records), default=0)
        return [
            format_tokens(render_patch(record), theme, name_width=name_width, color=color)
            for record in self.records
        ]
