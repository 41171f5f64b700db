"""Directory scanning and reporting utilities.

This package walks a directory tree, optionally filters its files by extension,
and renders the resulting structure as indented text.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirscan")
except PackageNotFoundError:
    __version__ = "unknown"
