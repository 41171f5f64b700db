"""Errors encountered while scanning a directory tree.

The scanner never lets these escape a scan. Each one is raised where the
underlying filesystem call fails, caught at the enclosing directory level,
recorded, and handed to the scanner's reporter so the walk can continue with
the next sibling.
"""

from typing import Optional

from dirscan.types import PathType


class ScanError(Exception):
    """
    Base class for problems found while walking the filesystem.

    Attributes:
        path (str): The path that could not be processed.
        reason (str): Short description of what went wrong.
        cause (Optional[OSError]): The underlying filesystem error, if any.

    Example:
        >>> error = ScanError("/tmp/missing", "Cannot access")
        >>> str(error)
        'Cannot access: /tmp/missing'
    """

    def __init__(self, path: PathType, reason: str, cause: Optional[OSError] = None) -> None:
        """
        Initialize the error with the offending path.

        Args:
            path (PathType): The path that could not be processed.
            reason (str): Short description of what went wrong.
            cause (Optional[OSError]): The underlying filesystem error. Defaults to None.
        """
        self.path = str(path)
        self.reason = reason
        self.cause = cause
        super().__init__(f"{reason}: {self.path}")


class RootInvalidError(ScanError):
    """
    Raised when a directory to scan does not exist, is not a directory, or cannot be stat'd.

    Example:
        >>> error = RootInvalidError("/etc/hostname", "Not a directory")
        >>> str(error)
        'Not a directory: /etc/hostname'
    """

    pass


class SubtreeReadError(ScanError):
    """
    Raised when the contents of a directory cannot be listed.

    Whatever was collected for the directory before the failure is kept.

    Example:
        >>> error = SubtreeReadError("/root/locked")
        >>> str(error)
        'Error reading directory: /root/locked'
    """

    def __init__(self, path: PathType, reason: str = "Error reading directory", cause: Optional[OSError] = None):
        super().__init__(path, reason, cause)


class StatError(ScanError):
    """
    Raised when a directory entry returned by a listing cannot be stat'd.

    Example:
        >>> error = StatError("/data/dangling-link")
        >>> str(error)
        'Error reading entry: /data/dangling-link'
    """

    def __init__(self, path: PathType, reason: str = "Error reading entry", cause: Optional[OSError] = None):
        super().__init__(path, reason, cause)
