"""StGit and Git exception classes.

Contains all exception classes for the command layer:
- StgError: Base exception for stg-related errors
- StgNotInitializedError: Raised when the branch has no StGit stack
- UnknownPatchError: Raised when a patch name is not in the series
- NoPatchSelectedError: Raised when no patch was given and none is marked
- GitError: Base exception for git-related errors
- NoUpstreamError: Raised when the current branch has no upstream
"""


class StgError(Exception):
    """Custom exception for stg-related errors."""

    pass


class StgNotInitializedError(StgError):
    """Raised when the current branch is not initialised for StGit."""

    pass


class UnknownPatchError(StgError):
    """Raised when a patch name does not exist in the series."""

    pass


class NoPatchSelectedError(StgError):
    """Raised when an action needs a patch but none was given or marked."""

    pass


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoUpstreamError(GitError):
    """Raised when the current branch has no upstream configured."""

    pass
