"""Command-line argument parsing for dirscan.

This module defines the command-line interface for dirscan,
handling argument parsing and validation.
"""

import argparse

from dirscan import __version__
from dirscan.directory_tree.extension_filter import ALL_EXTENSIONS, KNOWN_EXTENSIONS


def positive_int(value: str) -> int:
    """Argument type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirscan's options.
    """
    description = """
    dirscan: A read-only directory reporting tool.

    Recursively scans a directory, keeps the files whose extension matches the
    requested filter, and prints the resulting structure as an indented tree with
    file sizes. Directories without matching files are flagged with a notice.

    Unreadable directories and entries are reported as they are encountered and
    skipped; the rest of the tree is still scanned and printed.

    When no directory is given, the directory and extension are asked for
    interactively.
    """

    epilog = f"""
    Examples:
      # Report every file under a directory
      dirscan /path/to/project

      # Only keep Markdown files
      dirscan -x .md /path/to/project

      # Ask for the directory and extension interactively
      dirscan

      # Plain ASCII markers with four-space indentation, written to a file
      dirscan -a -w 4 -o report.txt /path/to/project

      # Silently skip unreadable subdirectories
      dirscan -E ignore /path/to/project

      # Exit with status 126 instead of printing a report if anything was unreadable
      dirscan -E fail /path/to/project

      # Print directory, file and byte totals to stderr
      dirscan -s stderr /path/to/project

      # Display version information and exit
      dirscan -V

    Common extensions: {', '.join(KNOWN_EXTENSIONS[1:])}
    """

    parser = argparse.ArgumentParser(
        prog="dirscan",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirscan {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        help="The directory to scan. If omitted, it is asked for interactively.",
    )
    parser.add_argument(
        "-x",
        "--extension",
        metavar="EXT",
        default=None,
        help=(
            f"Only keep files with this extension, including the leading dot (e.g. .txt). "
            f"Matching is exact and case-sensitive. Use '{ALL_EXTENSIONS}' to keep every file "
            f"(default: {ALL_EXTENSIONS})."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file path. If not specified, the report is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print directory, file and byte totals. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-E",
        "--error-action",
        choices=["warn", "ignore", "fail"],
        default="warn",
        help="How to handle unreadable directories and entries (default: warn).",
    )
    parser.add_argument(
        "-a",
        "--ascii",
        action="store_true",
        help="Use plain ASCII markers instead of emoji.",
    )
    parser.add_argument(
        "-w",
        "--indent-width",
        type=positive_int,
        default=2,
        metavar="N",
        help="Spaces of indentation per directory level (default: 2).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")

    if args.extension is not None and args.extension != ALL_EXTENSIONS and not args.extension.startswith("."):
        raise ValueError(f"--extension must be '{ALL_EXTENSIONS}' or start with '.', got {args.extension!r}")

    if args.directory is not None and not args.directory:
        raise ValueError("The directory path cannot be empty")
