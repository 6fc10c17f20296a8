"""StGit patch stack commands.

Contains:
- get_series_output: Raw `stg series` listing with descriptions and empty flags
- list_patch_names: Names of all patches in the series
- refresh_patch, repair, rebase, delete_patch, goto_patch: Mutating actions
- get_patch_id: Commit id of a patch
- init_stack: Initialise the current branch for StGit
"""

from typing import Optional

from stgseries.stg.runner import _run_stg_command


def get_series_output() -> str:
    """Get the series listing used to build the series view.

    Returns:
        Output of `stg series --all --description --empty`.
    """
    return _run_stg_command(["series", "--all", "--description", "--empty"])


def list_patch_names() -> list[str]:
    """Get the names of all patches in the series, in stack order.

    Returns:
        List of patch names.
    """
    output = _run_stg_command(["series", "--all", "--noprefix"])
    if not output:
        return []
    return [line.strip() for line in output.split("\n") if line.strip()]


def refresh_patch(patch: Optional[str] = None) -> str:
    """Refresh a patch with the current working tree changes.

    Args:
        patch: Patch to refresh. Refreshes the current patch when None.

    Returns:
        The stg output.
    """
    args = ["refresh"]
    if patch:
        args += ["-p", patch]
    return _run_stg_command(args)


def repair() -> str:
    """Fix StGit metadata after the branch was modified with git commands."""
    return _run_stg_command(["repair"])


def rebase(target: str) -> str:
    """Rebase the patch stack onto another commit.

    Args:
        target: The revision to rebase onto (e.g. "remotes/origin/main").

    Returns:
        The stg output.
    """
    return _run_stg_command(["rebase", target])


def delete_patch(patch: str) -> str:
    """Delete a patch from the series.

    Args:
        patch: Name of the patch to delete.

    Returns:
        The stg output.
    """
    return _run_stg_command(["delete", patch])


def goto_patch(patch: str) -> str:
    """Push or pop patches so that the given patch becomes current.

    Args:
        patch: Name of the patch to go to.

    Returns:
        The stg output.
    """
    return _run_stg_command(["goto", patch])


def get_patch_id(patch: str) -> str:
    """Get the commit id of a patch.

    Args:
        patch: Name of the patch.

    Returns:
        The commit SHA.
    """
    return _run_stg_command(["id", patch]).strip()


def init_stack() -> str:
    """Initialise the current branch for use with StGit."""
    return _run_stg_command(["init"])
