"""Directory scanning with extension filtering and per-subtree error containment.

This module provides the DirectoryScanner class, which walks a directory
depth-first, builds a DirectoryEntry tree from what it finds, and renders that
tree to a display sink.
"""

import os
import stat
import sys
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from anytree import PreOrderIter

from dirscan.directory_tree.directory_entry import DirectoryEntry
from dirscan.directory_tree.extension_filter import ALL_EXTENSIONS, ExtensionFilter
from dirscan.directory_tree.file_entry import FileEntry
from dirscan.directory_tree.tree_renderer import TreeRenderer
from dirscan.exceptions import RootInvalidError, ScanError, StatError, SubtreeReadError
from dirscan.types import LineSink, PathType

Reporter = Callable[[ScanError], None]


def print_diagnostic(error: ScanError) -> None:
    """Default reporter: print the error to stderr as soon as it happens."""
    print(f"Error: {error}", file=sys.stderr)


def print_line(line: str) -> None:
    """Default display: print a rendered line to stdout.

    Names the platform could not decode are written with backslash escapes
    instead of failing the report.
    """
    encoding = sys.stdout.encoding or "utf-8"
    print(line.encode(encoding, "backslashreplace").decode(encoding))


class DirectoryScanner:
    """A read-only scanner that mirrors a directory structure as a DirectoryEntry tree.

    The walk is strictly sequential and depth-first. Entries are appended in the
    order the filesystem lists them, and every subdirectory is attached to its
    parent before it is scanned, so a subtree that fails halfway still shows up
    with whatever it collected.

    Error Handling:
        Filesystem errors never leave the scanner. Each one is converted to a
        ScanError subclass, recorded in ``diagnostics`` and passed to the
        reporter, and only the directory where it happened stops being scanned:
        - RootInvalidError: the path is missing, not a directory, or cannot be stat'd
        - SubtreeReadError: the directory cannot be listed
        - StatError: an entry of the directory cannot be stat'd

    Attributes:
        root_path (Path): The directory to scan.
        depth (int): Depth level of the root, 0 for a top-level scan.
        extension_filter (ExtensionFilter): Decides which files are kept.
        renderer (TreeRenderer): Turns the tree into text lines.
        diagnostics (List[ScanError]): Errors reported by the most recent top-level scan.

    Example:
        >>> scanner = DirectoryScanner("src", extension=".py")  # doctest: +SKIP
        >>> scanner.get_tree().name  # doctest: +SKIP
        'src'
        >>> scanner.render()  # doctest: +SKIP
        📁 src
          📄 main.py ~ 120 bytes
          📁 utils
            📄 helpers.py ~ 64 bytes
    """

    def __init__(
        self,
        root_path: PathType,
        depth: int = 0,
        extension: Optional[str] = ALL_EXTENSIONS,
        reporter: Optional[Reporter] = None,
        display: Optional[LineSink] = None,
        renderer: Optional[TreeRenderer] = None,
    ) -> None:
        """Initialize a DirectoryScanner.

        Args:
            root_path: Path to the directory to scan. Can be any path-like object.
            depth: Depth level of the root. Defaults to 0.
            extension: ALL_EXTENSIONS, a dot-prefixed extension, or None for no
                filtering. Defaults to ALL_EXTENSIONS.
            reporter: Callable receiving each ScanError as it happens. Defaults to
                printing to stderr.
            display: Callable receiving each rendered line. Defaults to print_line.
            renderer: Renderer used by render(). Defaults to a TreeRenderer with
                two spaces of indentation per level.

        Raises:
            ValueError: If the extension is neither "all" nor dot-prefixed.
        """
        self.root_path = Path(root_path)
        self.depth = depth
        self.extension_filter = ExtensionFilter(extension)
        self.renderer = renderer if renderer is not None else TreeRenderer()
        self.diagnostics: List[ScanError] = []
        self._reporter = reporter if reporter is not None else print_diagnostic
        self._display = display if display is not None else print_line
        self._tree: Optional[DirectoryEntry] = None
        self._scanned = False

    @property
    def tree(self) -> Optional[DirectoryEntry]:
        """The root entry produced by the most recent top-level scan, if any."""
        return self._tree

    def _report(self, error: ScanError) -> None:
        self.diagnostics.append(error)
        self._reporter(error)

    def _check_directory(self, path: Path) -> None:
        try:
            stat_result = path.stat()
        except FileNotFoundError as e:
            raise RootInvalidError(path, "Directory does not exist", e) from e
        except OSError as e:
            raise RootInvalidError(path, "Error accessing directory", e) from e
        if not stat.S_ISDIR(stat_result.st_mode):
            raise RootInvalidError(path, "Not a directory")

    def _list_directory(self, path: Path) -> List[str]:
        try:
            return os.listdir(path)
        except OSError as e:
            raise SubtreeReadError(path, cause=e) from e

    def _stat_entry(self, path: Path) -> os.stat_result:
        try:
            return path.stat()
        except OSError as e:
            raise StatError(path, cause=e) from e

    def validate(self, path: PathType) -> bool:
        """Check that a path exists and is a directory.

        Failures are reported as RootInvalidError rather than raised.

        Args:
            path: The path to check.

        Returns:
            True if the path can be scanned, False otherwise.
        """
        try:
            self._check_directory(Path(path))
        except RootInvalidError as error:
            self._report(error)
            return False
        return True

    def scan(
        self,
        path: Optional[PathType] = None,
        depth: Optional[int] = None,
        entry: Optional[DirectoryEntry] = None,
    ) -> Optional[DirectoryEntry]:
        """Recursively scan a directory into a DirectoryEntry.

        At depth 0 a new root entry is created and stored as the scanner's tree.
        At any other depth ``entry`` is the working entry, already attached to
        its parent by the caller.

        Args:
            path: Directory to scan. Defaults to root_path.
            depth: Depth level of this directory. Defaults to the scanner's depth.
            entry: Working entry to populate. Required when depth is not 0 and
                ignored when it is.

        Returns:
            The populated working entry, or None if the directory was invalid or
            the root could not be listed.

        Raises:
            ValueError: If depth is not 0 and no entry is given.
        """
        path = Path(self.root_path if path is None else path)
        depth = self.depth if depth is None else depth

        if depth == 0:
            self._tree = None
            self.diagnostics = []
            self._scanned = True
            path = Path(os.path.abspath(path))
        elif entry is None:
            raise ValueError(f"A working entry is required to scan {path} at depth {depth}")

        if not self.validate(path):
            return None

        try:
            names = self._list_directory(path)
        except SubtreeReadError as error:
            self._report(error)
            return entry if depth != 0 else None

        working = entry if depth != 0 and entry is not None else DirectoryEntry(path.name or str(path))
        if depth == 0:
            self._tree = working

        for name in names:
            child_path = path / name
            try:
                stat_result = self._stat_entry(child_path)
            except StatError as error:
                # Same containment as a listing failure: stop this directory only
                self._report(error)
                break

            if stat.S_ISDIR(stat_result.st_mode):
                child = working.add_subdirectory(name)
                self.scan(child_path, depth + 1, child)
            elif self.extension_filter.matches(name):
                working.add_file(FileEntry(name, str(child_path), stat_result.st_size))

        return working

    def get_tree(self) -> Optional[DirectoryEntry]:
        """Get the root entry, scanning root_path on first access.

        Returns:
            The root entry, or None if the root could not be scanned.
        """
        if not self._scanned:
            self.scan()
        return self._tree

    def refresh(self) -> Optional[DirectoryEntry]:
        """Discard the stored tree and scan root_path again.

        Returns:
            The new root entry, or None if the root could not be scanned.
        """
        self._tree = None
        self._scanned = False
        return self.get_tree()

    def iterate_files(self) -> Iterator[FileEntry]:
        """Iterate over every file in the tree, directory by directory in render order.

        Yields:
            Each FileEntry in the tree.
        """
        tree = self.get_tree()
        if tree is None:
            return
        for directory in PreOrderIter(tree):
            yield from directory.files

    def get_file_count(self) -> int:
        """Get the number of files kept by the extension filter."""
        return sum(1 for _ in self.iterate_files())

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        tree = self.get_tree()
        if tree is None:
            return 0
        return len(tree.descendants)

    def get_total_size(self) -> int:
        """Get the combined size in bytes of all files in the tree."""
        return sum(file_entry.size for file_entry in self.iterate_files())

    def stream_tree_representation(self, entry: Optional[DirectoryEntry] = None, depth: int = 0) -> Iterator[str]:
        """Generate the rendered lines for an entry, defaulting to the scanned tree.

        Yields:
            Rendered lines without trailing newlines.
        """
        if entry is None:
            entry = self.get_tree()
        if entry is None:
            return
        yield from self.renderer.stream(entry, depth)

    def get_tree_representation(self, entry: Optional[DirectoryEntry] = None, depth: int = 0) -> str:
        """Get the complete rendering of an entry as a single string."""
        return "\n".join(self.stream_tree_representation(entry, depth))

    def render(self, entry: Optional[DirectoryEntry] = None, depth: int = 0) -> None:
        """Write the rendering of an entry to the display sink.

        Does nothing when there is no entry to render, for example after the
        root failed validation.

        Args:
            entry: Entry to render. Defaults to the scanned tree.
            depth: Depth level of the entry. Defaults to 0.
        """
        if entry is None:
            entry = self.get_tree()
        if entry is not None:
            self.renderer.render(entry, self._display, depth)
