"""Main CLI command: show the patch series of the current branch."""

from typing import Optional

import typer

from stgseries import __version__
from stgseries.global_config import GlobalConfigError
from stgseries.series import ParseError
from stgseries.stg import GitError, StgError, StgNotInitializedError, get_repo_root
from stgseries.cli.utils import (
    get_current_branch_safe,
    load_view,
    print_series,
    setup_runner,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stgseries {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Print the series without ANSI styling",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Echo every stg and git command before running it",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Show the StGit patch series of the current branch."""
    ctx.obj = {"color": not no_color, "verbose": verbose}

    # Subcommands do their own work
    if ctx.invoked_subcommand is not None:
        return

    try:
        repo_root = get_repo_root()
        settings = setup_runner(repo_root, verbose=verbose)
        view = load_view(repo_root)
        print_series(view, settings, color=not no_color)
    except StgNotInitializedError:
        typer.echo(f"Branch '{get_current_branch_safe()}' is not initialized for StGit.", err=True)
        typer.echo("", err=True)
        typer.echo("Initialize it with:", err=True)
        typer.echo("  stgseries init", err=True)
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
