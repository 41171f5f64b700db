"""Text rendering for scanned directory trees.

Every directory produces a line at its own indent level, followed by a notice
when it holds no matching files, then its files one level deeper, then its
subdirectories in the order they were scanned.
"""

from dataclasses import dataclass
from typing import Iterator

from anytree import PreOrderIter

from dirscan.directory_tree.directory_entry import DirectoryEntry
from dirscan.types import LineSink


@dataclass(frozen=True)
class Markers:
    """Glyphs placed in front of each kind of rendered line.

    Attributes:
        directory (str): Prefix for directory lines.
        file (str): Prefix for file lines.
        notice (str): Prefix for the "no matching files" notice.
    """

    directory: str
    file: str
    notice: str


EMOJI_MARKERS = Markers(directory="📁", file="📄", notice="⚠️")
ASCII_MARKERS = Markers(directory="[D]", file="[F]", notice="[!]")

NO_MATCHING_FILES = "No matching files"


class TreeRenderer:
    """Render a DirectoryEntry tree as indented text lines.

    Rendering only reads the tree, so the same tree can be rendered any number
    of times with identical results.

    Attributes:
        indent_width (int): Spaces of indentation per depth level.
        markers (Markers): Glyphs used for directories, files and notices.

    Example:
        >>> from dirscan.directory_tree.file_entry import FileEntry
        >>> root = DirectoryEntry("docs")
        >>> root.add_file(FileEntry("guide.md", "/docs/guide.md", 120))
        >>> _ = root.add_subdirectory("drafts")
        >>> for line in TreeRenderer(markers=ASCII_MARKERS).stream(root):
        ...     print(line)
        [D] docs
          [F] guide.md ~ 120 bytes
          [D] drafts
            [!] No matching files
    """

    def __init__(self, indent_width: int = 2, markers: Markers = EMOJI_MARKERS) -> None:
        """Initialize a TreeRenderer.

        Args:
            indent_width: Spaces of indentation per depth level. Defaults to 2.
            markers: Glyphs used in rendered lines. Defaults to EMOJI_MARKERS.

        Raises:
            ValueError: If indent_width is negative.
        """
        if indent_width < 0:
            raise ValueError(f"Indent width cannot be negative: {indent_width}")
        self.indent_width = indent_width
        self.markers = markers

    def _indent(self, depth: int) -> str:
        return " " * (depth * self.indent_width)

    def stream(self, entry: DirectoryEntry, depth: int = 0) -> Iterator[str]:
        """Generate the lines for an entry and everything beneath it.

        Args:
            entry: The directory entry to render.
            depth: Depth level of the entry itself. Defaults to 0.

        Yields:
            Rendered lines without trailing newlines.
        """
        # Pre-order visits each directory before its subdirectories, in stored order
        for directory in PreOrderIter(entry):
            level = depth + directory.depth - entry.depth
            yield f"{self._indent(level)}{self.markers.directory} {directory.name}"

            if not directory.files and not directory.has_matching_files:
                yield f"{self._indent(level + 1)}{self.markers.notice} {NO_MATCHING_FILES}"

            for file_entry in directory.files:
                yield f"{self._indent(level + 1)}{self.markers.file} {file_entry.name} ~ {file_entry.size} bytes"

    def render(self, entry: DirectoryEntry, sink: LineSink, depth: int = 0) -> None:
        """Send each rendered line of an entry to a sink.

        Args:
            entry: The directory entry to render.
            sink: Callable receiving one line at a time.
            depth: Depth level of the entry itself. Defaults to 0.
        """
        for line in self.stream(entry, depth):
            sink(line)
