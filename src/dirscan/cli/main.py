"""Command-line interface for dirscan.

This module provides the command-line interface for dirscan, which prints an
indented report of a directory tree, optionally limited to files with one
extension. It handles argument parsing, interactive prompting when no directory
is given, diagnostic reporting and exit codes.

Exit Codes:
    0: Successful completion
    1: Invalid directory or runtime error
    2: Command-line syntax error
    126: Unreadable entries encountered with --error-action fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g. when piping to `head`)

Example:
    # Report every file under a directory
    $ dirscan /path/to/dir

    # Only keep PDF files and print totals to stderr
    $ dirscan -x .pdf -s stderr /path/to/dir
"""

import os
import sys
from collections.abc import Mapping

from dirscan.cli.argparser import create_parser, validate_args
from dirscan.cli.prompt import prompt_for_directory, prompt_for_extension
from dirscan.cli.safe_writer import SafeWriter
from dirscan.directory_tree.directory_scanner import DirectoryScanner, Reporter
from dirscan.directory_tree.extension_filter import ALL_EXTENSIONS
from dirscan.directory_tree.tree_renderer import ASCII_MARKERS, EMOJI_MARKERS, TreeRenderer
from dirscan.exceptions import RootInvalidError, ScanError


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the directory, file and byte totals.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
            f"Bytes: {counts['bytes']}",
        ]
    )


def create_reporter(error_action: str) -> Reporter:
    """Build the diagnostic reporter for an --error-action value.

    An invalid root is always reported. With "ignore", unreadable directories and
    entries below the root are skipped silently.
    """

    def report(error: ScanError) -> None:
        if error_action == "ignore" and not isinstance(error, RootInvalidError):
            return
        label = "Warning" if error_action == "warn" and not isinstance(error, RootInvalidError) else "Error"
        print(f"{label}: {error}", file=sys.stderr)

    return report


def main() -> None:
    """Main entry point for the dirscan command-line interface.

    Exit codes:
        0: Successful completion
        1: Invalid directory or runtime error
        2: Command-line syntax error
        126: Unreadable entries encountered with --error-action fail
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)

        directory = args.directory
        extension = args.extension
        if directory is None:
            directory = prompt_for_directory()
            if extension is None:
                extension = prompt_for_extension()

        renderer = TreeRenderer(
            indent_width=args.indent_width,
            markers=ASCII_MARKERS if args.ascii else EMOJI_MARKERS,
        )

        with SafeWriter(args.output) as safe_writer:
            scanner = DirectoryScanner(
                os.path.abspath(directory),
                extension=extension or ALL_EXTENSIONS,
                reporter=create_reporter(args.error_action),
                display=safe_writer.write_line,
                renderer=renderer,
            )

            if scanner.get_tree() is None:
                sys.exit(1)

            if args.error_action == "fail" and scanner.diagnostics:
                print(
                    f"Error: {len(scanner.diagnostics)} unreadable item(s) encountered; no report generated.",
                    file=sys.stderr,
                )
                sys.exit(126)

            scanner.render()

            if args.summary:
                count_output_str = format_counts(
                    {
                        "directories": scanner.get_directory_count(),
                        "files": scanner.get_file_count(),
                        "bytes": scanner.get_total_size(),
                    }
                )
                if args.summary == "stderr":
                    print(count_output_str, file=sys.stderr)
                else:
                    # stdout and file both go wherever the report goes
                    safe_writer.write_line("")
                    safe_writer.write_line(count_output_str)

    except BrokenPipeError:
        # Keep the interpreter from complaining about stdout on shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except EOFError:
        print("Error: Input ended before a directory path was given.", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
