"""
Line-based read/eval/print loop.

The loop writes a prompt, reads one line, and hands it to the dispatcher.
Streams are injected so the loop can run against in-memory buffers.
"""

import logging
import sys
from typing import TextIO

from memshell.commands import execute
from memshell.config import ShellConfig
from memshell.session import Session

logger = logging.getLogger(__name__)


def run_repl(
    session: Session,
    config: ShellConfig | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Run the interpreter until the quit command or end of input.

    Params:
        session: Session the commands operate on
        config: Prompt and quit settings, defaults when omitted
        stdin: Input stream, ``sys.stdin`` by default
        stdout: Stream for prompts and command output, ``sys.stdout`` by default
        stderr: Stream for diagnostics, ``sys.stderr`` by default

    Returns:
        Process exit code, always 0
    """
    config = config or ShellConfig()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    while True:
        stdout.write(config.prompt(session.pwd()))
        stdout.flush()

        line = stdin.readline()
        if not line:
            logger.debug("End of input reached")
            break
        if line.strip() == config.quit_command:
            break

        result = execute(session, line)
        if result.output is not None:
            print(result.output, file=stdout)
        if result.error is not None:
            print(result.error, file=stderr)

    return 0
