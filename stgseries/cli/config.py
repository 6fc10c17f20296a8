"""CLI commands for configuration management."""

import typer

from stgseries import global_config
from stgseries.series import StyleTag
from stgseries.stg import GitError, get_repo_root
from stgseries.user_config import get_config_file, reset_config, set_repo_stg_executable
from stgseries.cli.utils import get_effective_settings

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage stgseries configuration (~/.stgseries/ and .stgseries/)",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration for the current repository."""
    try:
        try:
            repo_root = get_repo_root()
        except GitError:
            repo_root = None

        settings = get_effective_settings(repo_root)

        typer.echo("Effective stgseries configuration:")
        typer.echo()
        typer.echo(f"  stg executable: {settings.stg_executable}")
        typer.echo(f"  Color: {'on' if settings.color else 'off'}")
        typer.echo()
        typer.echo(f"  Global config: {global_config.get_config_file_path()}"
                   + ("" if global_config.is_configured() else " (not present)"))
        if repo_root is not None:
            repo_file = get_config_file(repo_root)
            typer.echo(f"  Repo config: {repo_file}"
                       + ("" if repo_file.exists() else " (not present)"))
        typer.echo()
        typer.echo("  Theme:")
        for tag in StyleTag:
            style = settings.theme.style_for(tag)
            attrs = [attr for attr, on in (("bold", style.bold), ("dim", style.dim)) if on]
            if style.fg:
                attrs.insert(0, style.fg)
            sample = typer.style(tag.value, fg=style.fg, bold=style.bold or None, dim=style.dim or None)
            typer.echo(f"    {sample}: {', '.join(attrs) or 'plain'}")

    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-executable")
def config_set_executable(
    executable: str = typer.Argument(
        ...,
        help="Name or path of the stg executable",
    ),
    repo: bool = typer.Option(
        False,
        "--repo",
        help="Store in the repository config instead of the global config",
    ),
) -> None:
    """Set the stg executable to run."""
    try:
        if repo:
            repo_root = get_repo_root()
            set_repo_stg_executable(repo_root, executable)
            typer.echo(f"✓ stg executable set to {executable} for {repo_root}")
        else:
            global_config.set_stg_executable(executable)
            typer.echo(f"✓ stg executable set to {executable}")
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("reset")
def config_reset(
    repo: bool = typer.Option(
        False,
        "--repo",
        help="Reset the repository config instead of the global config",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Do not ask for confirmation",
    ),
) -> None:
    """Clear the stg executable, color and theme settings."""
    try:
        if repo:
            repo_root = get_repo_root()
            target = str(get_config_file(repo_root))
        else:
            repo_root = None
            target = str(global_config.get_config_file_path())

        if not yes and not typer.confirm(f"Reset settings in {target}?", default=False):
            typer.echo("Aborted.")
            raise typer.Exit(0)

        if repo_root is not None:
            reset_config(repo_root)
        else:
            global_config.reset_global_config()
        typer.echo(f"✓ Settings reset in {target}")
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
