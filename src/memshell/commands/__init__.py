"""
memshell command processing.

This package contains the tokenizer, the command table, and the dispatcher
that runs interpreter lines against a session.
"""

from memshell.commands.dispatcher import (
    COMMANDS,
    CommandResult,
    CommandSpec,
    execute,
    lookup,
)
from memshell.commands.parser import tokenize

__all__ = [
    "COMMANDS",
    "CommandResult",
    "CommandSpec",
    "execute",
    "lookup",
    "tokenize",
]
