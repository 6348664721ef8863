"""
memshell - An in-memory folder tree driven by a small shell-like interpreter

memshell provides lexical path canonicalization, a folder/file node tree, and
the ls/pwd/mkdir/cd operations built on them.
"""

from importlib.metadata import version

from memshell.commands import CommandResult, execute
from memshell.core import File, Folder, canonicalize, to_absolute
from memshell.session import Session

__version__ = version("memshell")

__all__ = [
    "__version__",
    "Session",
    "Folder",
    "File",
    "canonicalize",
    "to_absolute",
    "CommandResult",
    "execute",
]
