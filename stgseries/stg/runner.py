"""StGit and Git command runners.

Contains:
- configure_runner: Set the stg executable and verbosity for this process
- _run_stg_command: Run an stg command and return its output
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path
from typing import Optional

import typer

from stgseries.global_config import get_stg_executable
from stgseries.stg.exceptions import GitError, StgError, StgNotInitializedError


# Substrings stg prints on stderr when the branch has no stack
_NOT_INITIALIZED_MARKERS = (
    "not initialized",
    "not initialised",
)

_executable: Optional[str] = None
_verbose = False


def configure_runner(executable: Optional[str] = None, verbose: bool = False) -> None:
    """Configure how commands are run for the rest of the process.

    Args:
        executable: stg executable to use. None falls back to the global config.
        verbose: Echo every stg/git command to stderr before running it.
    """
    global _executable, _verbose
    _executable = executable
    _verbose = verbose


def _echo_command(cmd: list[str]) -> None:
    if _verbose:
        typer.echo(f"$ {' '.join(cmd)}", err=True)


def _run_stg_command(args: list[str]) -> str:
    """Run an stg command and return its output.

    Args:
        args: List of arguments to pass to stg.

    Returns:
        The stdout of the stg command, with trailing whitespace removed.

    Raises:
        StgNotInitializedError: If the branch has no StGit stack.
        StgError: If the command fails or stg is not installed.
    """
    executable = _executable or get_stg_executable()
    cmd = [executable] + args
    _echo_command(cmd)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.rstrip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        if any(marker in stderr.lower() for marker in _NOT_INITIALIZED_MARKERS):
            raise StgNotInitializedError(
                f"Branch is not initialized for StGit. Run 'stgseries init' first.\n{stderr}"
            )
        raise StgError(f"StGit command failed: {' '.join(cmd)}\n{stderr}")
    except FileNotFoundError:
        raise StgError(f"StGit ({executable}) is not installed or not in PATH.")


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    cmd = ["git"] + args
    _echo_command(cmd)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
