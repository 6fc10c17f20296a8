"""StGit command layer for stgseries.

This package provides:
- exceptions: StgError, StgNotInitializedError, UnknownPatchError,
              NoPatchSelectedError, GitError, NoUpstreamError
- runner: configure_runner, _run_stg_command, _run_git_command, get_repo_root
- commands: get_series_output, list_patch_names, refresh_patch, repair,
            rebase, delete_patch, goto_patch, get_patch_id, init_stack
- git: get_upstream_branch, fetch_remote, show_commit
"""

# Exceptions
from stgseries.stg.exceptions import (
    GitError,
    NoPatchSelectedError,
    NoUpstreamError,
    StgError,
    StgNotInitializedError,
    UnknownPatchError,
)

# Runner utilities
from stgseries.stg.runner import (
    _run_git_command,
    _run_stg_command,
    configure_runner,
    get_repo_root,
)

# StGit commands
from stgseries.stg.commands import (
    delete_patch,
    get_patch_id,
    get_series_output,
    goto_patch,
    init_stack,
    list_patch_names,
    rebase,
    refresh_patch,
    repair,
)

# Git helpers
from stgseries.stg.git import (
    fetch_remote,
    get_upstream_branch,
    show_commit,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoPatchSelectedError",
    "NoUpstreamError",
    "StgError",
    "StgNotInitializedError",
    "UnknownPatchError",
    # Runner
    "_run_git_command",
    "_run_stg_command",
    "configure_runner",
    "get_repo_root",
    # Commands
    "delete_patch",
    "get_patch_id",
    "get_series_output",
    "goto_patch",
    "init_stack",
    "list_patch_names",
    "rebase",
    "refresh_patch",
    "repair",
    # Git
    "fetch_remote",
    "get_upstream_branch",
    "show_commit",
]
