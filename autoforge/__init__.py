"""Offline commit message and branch name generator."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("autoforge")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
