"""
Exception classes for memshell tree operations and command dispatch.

This module defines specific exception types for the error conditions that
can occur while resolving paths, mutating the node tree, and dispatching
interpreter commands. Session operations raise them; the command layer turns
them into one-line diagnostics.
"""


class MemShellError(Exception):
    """Base exception for all memshell-related errors."""

    pass


class PathNotFoundError(MemShellError):
    """Raised when a path does not resolve to any node."""

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: The path as supplied by the caller
        """
        self.path = path
        super().__init__(f"'{path}': No such file or directory")


class NotAFolderError(MemShellError):
    """Raised when a path resolves to a file where a folder is required."""

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: The path as supplied by the caller
        """
        self.path = path
        super().__init__(f"'{path}': Not a directory")


class NameConflictError(MemShellError):
    """Raised when a name is already taken by a node of an incompatible kind."""

    def __init__(self, name: str, kind: str = "file"):
        """
        Initialize the exception.

        Params:
            name: The conflicting child name
            kind: Kind of the node already holding the name ("file" or "folder")
        """
        self.name = name
        self.kind = kind
        super().__init__(f"{kind.capitalize()} '{name}' exists!")


class PathValidationError(MemShellError):
    """Raised when a name or path cannot be used for the requested operation."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The invalid path or name
            reason: Why the path is invalid
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path '{path}': {reason}")


class CommandError(MemShellError):
    """Base exception for interpreter-level command failures."""

    def __init__(self, command: str, message: str):
        self.command = command
        super().__init__(message)


class MissingOperandError(CommandError):
    """Raised when a command is invoked with fewer arguments than it needs."""

    def __init__(self, command: str):
        super().__init__(command, f"{command}: missing operand")


class UnknownCommandError(CommandError):
    """Raised when the command name is not registered."""

    def __init__(self, command: str):
        super().__init__(command, f"Command '{command}' not found")
