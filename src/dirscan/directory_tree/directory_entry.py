"""Node representation for directories in the scanned tree."""

from typing import Any, List, Optional, Tuple

from anytree import Node

from dirscan.directory_tree.file_entry import FileEntry


class DirectoryEntry(Node):  # type: ignore
    """Node class representing one scanned directory.

    Extends anytree.Node so that subdirectories are the node's children. anytree
    keeps each entry attached to exactly one parent and refuses cycles, which
    makes the scan result a proper tree. Files are plain FileEntry values stored
    in listing order on the node itself.

    Attributes:
        name (str): The directory's base name.
        parent (Optional[DirectoryEntry]): The parent entry, None for the root.
        files (List[FileEntry]): Files that passed the extension filter, in listing order.
        has_matching_files (bool): True once a file has been added directly to this entry.

    Example:
        >>> root = DirectoryEntry("project")
        >>> src = root.add_subdirectory("src")
        >>> src.add_file(FileEntry("main.py", "/project/src/main.py", 10))
        >>> [d.name for d in root.subdirectories]
        ['src']
        >>> root.has_matching_files, src.has_matching_files
        (False, True)
    """

    def __init__(self, name: str, parent: Optional["DirectoryEntry"] = None, **kwargs: Any) -> None:
        """Initialize an empty DirectoryEntry.

        Args:
            name: The directory's base name.
            parent: The entry this one belongs to. When given, the new entry is
                appended to the parent's subdirectories. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.files: List[FileEntry] = []
        self.has_matching_files = False

    @property
    def subdirectories(self) -> Tuple["DirectoryEntry", ...]:
        """Subdirectory entries in the order they were added."""
        return tuple(self.children)

    def add_file(self, file_entry: FileEntry) -> None:
        """Append a file and mark this directory as having matching files.

        Args:
            file_entry: The file to append.
        """
        self.files.append(file_entry)
        self.has_matching_files = True

    def add_subdirectory(self, name: str) -> "DirectoryEntry":
        """Create an empty child entry and append it to this entry's subdirectories.

        Args:
            name: The child directory's base name.

        Returns:
            The newly attached child entry.
        """
        return DirectoryEntry(name, parent=self)
