"""StGit patch series viewer CLI tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("stgseries")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
