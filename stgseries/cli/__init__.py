"""CLI entry point for stgseries.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from stgseries.cli.config import config_app
from stgseries.cli.main import main_command
from stgseries.cli.patch import (
    discard_command,
    goto_command,
    init_command,
    mark_command,
    rebase_command,
    refresh_command,
    repair_command,
    show_command,
    unmark_command,
)

# Main application
app = typer.Typer(
    name="stgseries",
    help="stgseries: view and drive a StGit patch stack",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("refresh")(refresh_command)
app.command("repair")(repair_command)
app.command("rebase")(rebase_command)
app.command("discard")(discard_command)
app.command("goto")(goto_command)
app.command("show")(show_command)
app.command("mark")(mark_command)
app.command("unmark")(unmark_command)
app.command("init")(init_command)

# Set the main callback for default behavior (prints the series)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
