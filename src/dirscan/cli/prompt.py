"""Interactive collection of the directory and extension to scan."""

from typing import Callable, Optional, TextIO

from dirscan.directory_tree.extension_filter import ALL_EXTENSIONS, KNOWN_EXTENSIONS

InputFunction = Callable[[str], str]

DIRECTORY_PROMPT = "Enter the path to the directory you want to scan (e.g. /home/user/Documents): "
INVALID_DIRECTORY = "Please enter a valid directory path"


def prompt_for_directory(input_func: InputFunction = input, output: Optional[TextIO] = None) -> str:
    """Ask for a directory path until a non-empty answer is given.

    Only emptiness is checked here; whether the path is a directory is the
    scanner's concern.

    Args:
        input_func: Function used to read an answer. Defaults to input.
        output: Stream for validation messages. Defaults to stdout.

    Returns:
        The path as typed, stripped of surrounding whitespace.
    """
    while True:
        answer = input_func(DIRECTORY_PROMPT).strip()
        if answer:
            return answer
        print(INVALID_DIRECTORY, file=output)


def prompt_for_extension(input_func: InputFunction = input, output: Optional[TextIO] = None) -> str:
    """Ask which extension to filter by.

    The answer can be the number of a listed choice or an extension typed
    directly. An empty answer selects "all".

    Args:
        input_func: Function used to read an answer. Defaults to input.
        output: Stream for the choice list and validation messages. Defaults to stdout.

    Returns:
        ALL_EXTENSIONS or a dot-prefixed extension.
    """
    print("Select an extension to filter by:", file=output)
    for number, choice in enumerate(KNOWN_EXTENSIONS, start=1):
        print(f"  {number:2}. {choice}", file=output)

    while True:
        answer = input_func(f"Extension [1-{len(KNOWN_EXTENSIONS)} or .ext, default {ALL_EXTENSIONS}]: ").strip()
        if not answer:
            return ALL_EXTENSIONS
        if answer.isdigit() and 1 <= int(answer) <= len(KNOWN_EXTENSIONS):
            return KNOWN_EXTENSIONS[int(answer) - 1]
        if answer == ALL_EXTENSIONS or answer.startswith("."):
            return answer
        print(f"Please choose a number from the list, '{ALL_EXTENSIONS}', or an extension such as .txt", file=output)
