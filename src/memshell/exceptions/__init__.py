"""
memshell exception classes.

This package provides all exception types used throughout memshell for
consistent error handling and reporting.
"""

from memshell.exceptions.core import (
    CommandError,
    MemShellError,
    MissingOperandError,
    NameConflictError,
    NotAFolderError,
    PathNotFoundError,
    PathValidationError,
    UnknownCommandError,
)

__all__ = [
    "MemShellError",
    "PathNotFoundError",
    "NotAFolderError",
    "NameConflictError",
    "PathValidationError",
    "CommandError",
    "MissingOperandError",
    "UnknownCommandError",
]
