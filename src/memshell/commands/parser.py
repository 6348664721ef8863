"""
Command line tokenization.
"""

from memshell.core.types import Argv


def tokenize(line: str) -> Argv:
    """
    Split a command line into its arguments.

    Runs of whitespace (spaces, tabs, newlines) separate arguments; leading and
    trailing whitespace is ignored.

    Params:
        line: Raw line as read from the input stream

    Returns:
        List of arguments, empty for a blank line

    Examples:
        "mkdir  bau \\n" -> ["mkdir", "bau"]
        "" -> []
    """
    return line.split()
