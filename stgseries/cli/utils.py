"""Shared utility functions for CLI commands."""

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from stgseries import global_config
from stgseries.series import Theme, load_theme_from_dict
from stgseries.stg import (
    configure_runner,
    get_series_output,
)
from stgseries.user_config import (
    get_marked_patch,
    get_repo_stg_executable,
    load_config,
)
from stgseries.view import SeriesView


@dataclass
class EffectiveSettings:
    """Settings after merging repo config over global config."""

    stg_executable: str
    color: bool
    theme: Theme


def get_effective_settings(repo_root: Optional[Path]) -> EffectiveSettings:
    """Get the effective settings for this invocation.

    Priority: STGSERIES_STG environment variable > repo config > global
    config > defaults. Theme entries from the repo override global ones
    tag by tag.

    Args:
        repo_root: Repository root, or None outside a repository.

    Returns:
        EffectiveSettings instance.
    """
    repo_config = load_config(repo_root) if repo_root else {}

    executable = global_config.get_stg_executable()
    if repo_root and not os.environ.get(global_config.STG_EXECUTABLE_ENV):
        executable = get_repo_stg_executable(repo_root) or executable

    color = repo_config.get("color")
    if color is None:
        color = global_config.get_color_preference()
    if color is None:
        color = True

    theme_dict = dict(global_config.get_theme_config())
    theme_dict.update(repo_config.get("theme") or {})
    theme = load_theme_from_dict({"theme": theme_dict})

    return EffectiveSettings(stg_executable=executable, color=bool(color), theme=theme)


def setup_runner(repo_root: Optional[Path], verbose: bool = False) -> EffectiveSettings:
    """Resolve settings and configure the command runner with them."""
    settings = get_effective_settings(repo_root)
    configure_runner(settings.stg_executable, verbose=verbose)
    return settings


def load_view(repo_root: Path) -> SeriesView:
    """Build a SeriesView for the repository from a fresh series listing.

    Raises:
        StgError: If the series command fails.
        ParseError: If the listing cannot be parsed.
    """
    view = SeriesView(marked_patch=get_marked_patch(repo_root))
    view.refresh(get_series_output())
    return view


def print_series(view: SeriesView, settings: EffectiveSettings, color: bool = True) -> None:
    """Print the series view, one patch per line."""
    if not view.records:
        typer.echo("No patches in series.", err=True)
        return
    for line in view.render(settings.theme, color=color and settings.color):
        typer.echo(line)


def get_current_branch_safe() -> str:
    """Safely get the current branch name without raising errors.

    Returns:
        The branch name, or 'unknown' if it cannot be determined.
    """
    try:
        result = subprocess.run(
            ["git", "branch", "--show-current"],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
        return "unknown"
    except OSError:
        return "unknown"


def colorize_diff(text: str) -> str:
    """Add ANSI color codes to `git show` output like git does.

    - Yellow for commit lines
    - Red for removed lines (-)
    - Green for added lines (+)
    - Cyan for hunk headers (@@)
    - Bold for diff/file header lines

    Args:
        text: Raw show output.

    Returns:
        Colorized text.
    """
    colorized = []
    for line in text.split("\n"):
        if line.startswith("commit "):
            colorized.append(typer.style(line, fg="yellow"))
        elif line.startswith("@@"):
            colorized.append(typer.style(line, fg="cyan"))
        elif line.startswith("---") or line.startswith("+++"):
            colorized.append(typer.style(line, bold=True))
        elif line.startswith("-"):
            colorized.append(typer.style(line, fg="red"))
        elif line.startswith("+"):
            colorized.append(typer.style(line, fg="green"))
        elif line.startswith("diff --git"):
            colorized.append(typer.style(line, bold=True))
        else:
            colorized.append(line)
    return "\n".join(colorized)


def show_in_pager(text: str) -> None:
    """Display text in a scrollable pager.

    Uses less when available and falls back to printing directly.

    Args:
        text: The text to display.
    """
    # noinspection PyArgumentList
    less_path = shutil.which("less")
    if less_path:
        try:
            proc = subprocess.Popen(
                [less_path, "-R", "--quit-if-one-screen"],
                stdin=subprocess.PIPE,
                encoding="utf-8",
            )
            proc.communicate(input=text)
            return
        except (OSError, BrokenPipeError):
            pass

    typer.echo(text)

