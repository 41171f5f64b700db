from os import PathLike
from typing import Callable, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Receives one rendered line at a time (without a trailing newline)
LineSink = Callable[[str], None]
