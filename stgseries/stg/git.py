"""Git helpers needed around StGit actions.

Contains:
- get_upstream_branch: Get the upstream of the current branch
- fetch_remote: Fetch from a remote
- show_commit: Get the `git show` output for a commit
"""

from stgseries.stg.exceptions import GitError, NoUpstreamError
from stgseries.stg.runner import _run_git_command


def get_upstream_branch() -> tuple[str, str]:
    """Get the upstream of the current branch.

    Returns:
        Tuple of (remote, branch), e.g. ("origin", "main").

    Raises:
        NoUpstreamError: If the current branch has no upstream.
    """
    try:
        upstream = _run_git_command(
            ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"]
        )
    except GitError:
        raise NoUpstreamError("Current branch has no upstream configured.")

    if "/" not in upstream:
        # Upstream is a local branch
        raise NoUpstreamError(f"Upstream '{upstream}' is not a remote-tracking branch.")

    remote, branch = upstream.split("/", 1)
    return remote, branch


def fetch_remote(remote: str) -> str:
    """Fetch from a remote.

    Args:
        remote: Remote name.

    Returns:
        The git output.
    """
    return _run_git_command(["fetch", remote])


def show_commit(rev: str) -> str:
    """Get the `git show` output for a commit.

    Args:
        rev: Commit to show.

    Returns:
        Commit header, stat and patch.
    """
    return _run_git_command(["show", "--stat", "-p", rev])
