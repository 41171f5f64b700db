"""Line-oriented output for the dirscan CLI.

This module provides a writer for rendered report lines that targets either
stdout or a file, and turns a closed pipe into a single BrokenPipeError.

File names the platform could not decode reach the writer as surrogate
escapes. A report file receives their original bytes back; a stream such as
the terminal shows them as backslash escapes.
"""

import errno
import sys
import types
from pathlib import Path
from typing import Optional, TextIO, Type

from dirscan.types import PathType


class SafeWriter:
    """Write report lines to stdout or a file.

    A target file is only created when the first line is written, so a run
    that produces no report leaves no file behind.

    Attributes:
        target: The output file path, or None for stdout.
        lines_written (int): Number of lines written so far.
    """

    def __init__(self, target: Optional[PathType] = None, stream: Optional[TextIO] = None):
        """Initialize the writer.

        Args:
            target: Path of a file to create on first write, or None to write to the stream.
            stream: Stream used when no target is given. Defaults to sys.stdout.
        """
        self.target = target
        self.lines_written = 0
        self._closed = False
        self._owns_stream = target is not None
        self._stream: Optional[TextIO] = None

        if target is None:
            self._stream = stream if stream is not None else sys.stdout
            reconfigure = getattr(self._stream, "reconfigure", None)
            if reconfigure is not None:
                reconfigure(errors="backslashreplace")

    def _open(self) -> TextIO:
        if self._stream is None:
            target = Path(self.target)  # type: ignore[arg-type]
            self._stream = target.open("w", encoding="utf-8", errors="surrogateescape")
        return self._stream

    def write_line(self, line: str) -> None:
        """Write one line followed by a newline.

        Args:
            line: The line to write, without a trailing newline.

        Raises:
            BrokenPipeError: If the reading end of the output pipe was closed.
            OSError: If the target file cannot be created.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        stream = self._open()
        try:
            stream.write(line + "\n")
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise
        self.lines_written += 1

    def close(self) -> None:
        """Flush the output and close it if this writer opened it."""
        if self._closed:
            return
        self._closed = True
        if self._stream is None:
            return

        try:
            if self._owns_stream:
                self._stream.close()
            else:
                self._stream.flush()
        except OSError as e:
            if e.errno != errno.EPIPE:
                raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An error from the with block takes priority over one from closing
            if exc_type is None:
                raise
