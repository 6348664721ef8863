"""
Command table and dispatch for the interpreter.

Each registered command declares how many operands it needs and a handler
that calls into the session. ``execute`` turns a raw line into a
``CommandResult``: session errors are caught here and rendered as one-line
diagnostics prefixed with the command name, so no command failure escapes to
the read loop.
"""

import logging
from collections.abc import Callable

from attrs import frozen

from memshell.commands.parser import tokenize
from memshell.core.types import Argv
from memshell.exceptions import (
    CommandError,
    MemShellError,
    MissingOperandError,
    UnknownCommandError,
)
from memshell.session import Session

logger = logging.getLogger(__name__)

Handler = Callable[[Session, Argv], str | None]


@frozen
class CommandResult:
    """
    Outcome of one interpreter line.

    Params:
        output: Text for the output stream, None when there is nothing to show
        error: Diagnostic for the error stream, None on success
    """

    output: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@frozen
class CommandSpec:
    """
    A registered interpreter command.

    Params:
        name: Command name as typed
        min_args: Operands required after the name
        handler: Callable receiving the session and the full argv
    """

    name: str
    min_args: int
    handler: Handler

    def check_operands(self, argv: Argv) -> None:
        if len(argv) < self.min_args + 1:
            raise MissingOperandError(self.name)


def _operand(argv: Argv) -> str | None:
    return argv[1] if len(argv) > 1 else None


def _ls(session: Session, argv: Argv) -> str:
    return session.ls(_operand(argv))


def _pwd(session: Session, argv: Argv) -> str:
    return session.pwd()


def _mkdir(session: Session, argv: Argv) -> None:
    session.mkdir(argv[1])


def _cd(session: Session, argv: Argv) -> None:
    session.cd(_operand(argv))


COMMANDS: dict[str, CommandSpec] = {
    command.name: command
    for command in (
        CommandSpec("ls", 0, _ls),
        CommandSpec("pwd", 0, _pwd),
        CommandSpec("mkdir", 1, _mkdir),
        CommandSpec("cd", 0, _cd),
    )
}


def lookup(name: str) -> CommandSpec:
    """
    Find the command registered under ``name``.

    Raises:
        UnknownCommandError: If no such command exists
    """
    try:
        return COMMANDS[name]
    except KeyError:
        raise UnknownCommandError(name) from None


def execute(session: Session, line: str) -> CommandResult:
    """
    Run one interpreter line against ``session``.

    Params:
        session: Session the command operates on
        line: Raw input line

    Returns:
        CommandResult with the text to print; empty output is reported as None
        and a blank line yields an empty result
    """
    argv = tokenize(line)
    if not argv:
        return CommandResult()

    try:
        command = lookup(argv[0])
        command.check_operands(argv)
    except CommandError as e:
        logger.debug(f"Rejected command line {argv!r}: {e}")
        return CommandResult(error=str(e))

    try:
        output = command.handler(session, argv)
    except MemShellError as e:
        logger.debug(f"Command '{command.name}' failed: {e}")
        return CommandResult(error=f"{command.name}: {e}")

    return CommandResult(output=output or None)
