"""File representation for scanned directory trees."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """A file that passed the extension filter during a scan.

    Attributes:
        name (str): The base filename.
        path (str): The full path the file was found at.
        size (int): The file size in bytes.

    Example:
        >>> entry = FileEntry("notes.txt", "/home/user/notes.txt", 12)
        >>> entry.name
        'notes.txt'
        >>> entry.size
        12
    """

    name: str
    path: str
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")
