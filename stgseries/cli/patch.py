"""CLI commands acting on the patch stack.

Every mutating command re-prints the series afterwards so the user sees
the resulting stack.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer

from stgseries.global_config import GlobalConfigError
from stgseries.series import ParseError
from stgseries.stg import (
    GitError,
    NoPatchSelectedError,
    NoUpstreamError,
    StgError,
    UnknownPatchError,
    delete_patch,
    fetch_remote,
    get_patch_id,
    get_repo_root,
    get_upstream_branch,
    goto_patch,
    init_stack,
    list_patch_names,
    rebase,
    refresh_patch,
    repair,
    show_commit,
)
from stgseries.user_config import get_marked_patch, set_marked_patch
from stgseries.view import SeriesView
from stgseries.cli.utils import (
    EffectiveSettings,
    colorize_diff,
    load_view,
    print_series,
    setup_runner,
    show_in_pager,
)


@contextmanager
def _report_errors() -> Iterator[None]:
    """Turn command-layer errors into a message on stderr and exit code 1."""
    try:
        yield
    except (NoPatchSelectedError, UnknownPatchError, NoUpstreamError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)
    except StgError as e:
        typer.echo(f"StGit error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)


def _prepare(ctx: typer.Context) -> tuple[Path, EffectiveSettings]:
    options = ctx.obj or {}
    repo_root = get_repo_root()
    settings = setup_runner(repo_root, verbose=options.get("verbose", False))
    return repo_root, settings


def _use_color(ctx: typer.Context) -> bool:
    return (ctx.obj or {}).get("color", True)


def _echo_output(output: str) -> None:
    if output:
        typer.echo(output, err=True)


def _reprint_series(ctx: typer.Context, repo_root: Path, settings: EffectiveSettings) -> None:
    view = load_view(repo_root)
    print_series(view, settings, color=_use_color(ctx))


def _resolve_patch(repo_root: Path, patch: Optional[str]) -> str:
    view = SeriesView(marked_patch=get_marked_patch(repo_root))
    return view.resolve_target(patch, list_patch_names())


def refresh_command(
    ctx: typer.Context,
    patch: Optional[str] = typer.Argument(
        None,
        help="Patch to refresh (default: the current patch)",
    ),
) -> None:
    """Refresh a patch with the changes in the working tree."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        if patch:
            patch = SeriesView().resolve_target(patch, list_patch_names())
        _echo_output(refresh_patch(patch))
        _reprint_series(ctx, repo_root, settings)


def repair_command(ctx: typer.Context) -> None:
    """Repair StGit metadata after git commands changed the branch."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        _echo_output(repair())
        _reprint_series(ctx, repo_root, settings)


def rebase_command(
    ctx: typer.Context,
    fetch: Optional[bool] = typer.Option(
        None,
        "--fetch/--no-fetch",
        help="Fetch the upstream remote before rebasing (asks when not given)",
    ),
) -> None:
    """Rebase the patch stack onto the upstream of the current branch."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        remote, branch = get_upstream_branch()

        if fetch is None:
            fetch = typer.confirm(f"Update remote '{remote}' first?", default=False)
        if fetch:
            typer.echo(f"Fetching {remote}...", err=True)
            fetch_remote(remote)

        target = f"remotes/{remote}/{branch}"
        typer.echo(f"Rebasing onto {target}...", err=True)
        _echo_output(rebase(target))
        _reprint_series(ctx, repo_root, settings)


def discard_command(
    ctx: typer.Context,
    patch: Optional[str] = typer.Argument(
        None,
        help="Patch to discard (default: the marked patch)",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Do not ask for confirmation",
    ),
) -> None:
    """Delete a patch from the series."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        target = _resolve_patch(repo_root, patch)

        if not yes and not typer.confirm(f"Discard patch `{target}'?", default=False):
            typer.echo("Aborted.", err=True)
            raise typer.Exit(0)

        _echo_output(delete_patch(target))
        if get_marked_patch(repo_root) == target:
            set_marked_patch(repo_root, None)
        typer.echo(f"Discarded patch: {target}", err=True)
        _reprint_series(ctx, repo_root, settings)


def goto_command(
    ctx: typer.Context,
    patch: Optional[str] = typer.Argument(
        None,
        help="Patch to make current (default: the marked patch)",
    ),
) -> None:
    """Push or pop patches until the given patch is current."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        target = _resolve_patch(repo_root, patch)
        _echo_output(goto_patch(target))
        _reprint_series(ctx, repo_root, settings)


def show_command(
    ctx: typer.Context,
    patch: Optional[str] = typer.Argument(
        None,
        help="Patch to show (default: the marked patch)",
    ),
    no_pager: bool = typer.Option(
        False,
        "--no-pager",
        help="Print directly instead of using a pager",
    ),
) -> None:
    """Show the commit of a patch."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        target = _resolve_patch(repo_root, patch)
        text = show_commit(get_patch_id(target))

        if _use_color(ctx) and settings.color:
            text = colorize_diff(text)
        if no_pager:
            typer.echo(text)
        else:
            show_in_pager(text)


def mark_command(
    ctx: typer.Context,
    patch: str = typer.Argument(
        ...,
        help="Patch to mark",
    ),
) -> None:
    """Mark a patch as the default target of later commands."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        view = load_view(repo_root)
        target = view.resolve_target(patch)
        view.mark(target)
        set_marked_patch(repo_root, view.marked_patch)
        typer.echo(f"Marked patch: {target}", err=True)
        print_series(view, settings, color=_use_color(ctx))


def unmark_command(ctx: typer.Context) -> None:
    """Clear the marked patch."""
    with _report_errors():
        repo_root, settings = _prepare(ctx)
        view = load_view(repo_root)
        marked = view.marked_patch
        if not marked:
            typer.echo("No patch is marked.", err=True)
            return
        view.unmark()
        set_marked_patch(repo_root, None)
        typer.echo(f"Unmarked patch: {marked}", err=True)
        print_series(view, settings, color=_use_color(ctx))


def init_command(ctx: typer.Context) -> None:
    """Initialize the current branch for StGit."""
    with _report_errors():
        _prepare(ctx)
        _echo_output(init_stack())
        typer.echo("Branch initialized for StGit.", err=True)
