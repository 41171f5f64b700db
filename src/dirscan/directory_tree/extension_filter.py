"""Extension filter deciding which files a scan keeps."""

import os
from typing import Any, Optional

# Filter value that accepts every file
ALL_EXTENSIONS = "all"

# Choices offered when the extension is collected interactively
KNOWN_EXTENSIONS = (
    ALL_EXTENSIONS,
    ".doc",
    ".docx",
    ".pdf",
    ".ppt",
    ".pptx",
    ".xls",
    ".xlsx",
    ".zip",
    ".txt",
    ".ts",
    ".tsx",
    ".js",
    ".html",
    ".jsx",
)


def extension_of(name: str) -> str:
    """Return a filename's extension as the platform extracts it.

    The leading dot is included and only the last segment counts. Names without
    an extension, including dotfiles, have an empty extension.

    Args:
        name: A base filename.

    Returns:
        The extension string, possibly empty.

    Example:
        >>> extension_of("archive.tar.gz")
        '.gz'
        >>> extension_of(".bashrc")
        ''
    """
    return os.path.splitext(name)[1]


class ExtensionFilter:
    """Case-sensitive exact-match filter on file extensions.

    Attributes:
        value (str): Either ALL_EXTENSIONS or a dot-prefixed extension.

    Example:
        >>> ExtensionFilter(".md").matches("README.md")
        True
        >>> ExtensionFilter(".md").matches("README.MD")
        False
        >>> ExtensionFilter(None).matches("anything")
        True
    """

    def __init__(self, value: Optional[str] = ALL_EXTENSIONS) -> None:
        """Initialize the filter.

        Args:
            value: ALL_EXTENSIONS, a dot-prefixed extension, or None/empty for
                no filtering. Defaults to ALL_EXTENSIONS.

        Raises:
            ValueError: If the value is neither "all" nor dot-prefixed.
        """
        if not value:
            value = ALL_EXTENSIONS
        if value != ALL_EXTENSIONS and not value.startswith("."):
            raise ValueError(f"Invalid extension filter: {value!r}. Must be '{ALL_EXTENSIONS}' or start with '.'")
        self.value = value

    @property
    def accepts_all(self) -> bool:
        return self.value == ALL_EXTENSIONS

    def matches(self, name: str) -> bool:
        """Check whether a file with this name passes the filter."""
        return self.accepts_all or extension_of(name) == self.value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ExtensionFilter):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return False

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ExtensionFilter({self.value!r})"
