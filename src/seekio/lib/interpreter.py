"""
Command interpreter for seekio.

The `Interpreter` runs command tokens one after another against a single
session. Each command produces one report line; the first failure stops the
run, leaving the effects of earlier commands in place.
"""

from collections.abc import Callable, Iterable

from seekio.lib.commands import Command, ReadHex, ReadText, SeekAbsolute, WriteLiteral, parse_command
from seekio.lib.logger import Logger


def render_text(data: bytes) -> str:
    """Render bytes as printable ASCII, with `?` for anything else."""

    return "".join(chr(b) if 0x20 <= b < 0x7F else "?" for b in data)


def render_hex(data: bytes) -> str:
    """Render bytes as space separated two-digit lowercase hex."""

    return " ".join(f"{b:02x}" for b in data)


class Interpreter:
    """
    Dispatch commands to a session and report the results.

    The session only needs `read(length)`, `write(data)`, `seek(offset)` and a
    `cursor` attribute, so tests can pass an in-memory double.
    """

    def __init__(self, session, emit: Callable[[str], None] | None = None):
        """
        Initialize an interpreter.

        Args:
            session: The open session to operate on.
            emit (Callable, optional): Receives each report line. Defaults to `print`.
        """

        self.session = session
        self.emit = emit if emit is not None else print

    def execute(self, command: Command) -> str:
        """
        Perform one command and return its report line.

        Raises:
            IoError: If the underlying read, write or seek fails.
            ShortWriteError: If a write is only partly completed.
        """

        if isinstance(command, (ReadText, ReadHex)):
            data = self.session.read(command.length)
            if not data:
                return f"{command.token}: end-of-file"

            render = render_text if isinstance(command, ReadText) else render_hex
            return f"{command.token}: {render(data)}"

        if isinstance(command, WriteLiteral):
            written = self.session.write(command.data)
            return f"{command.token}: wrote {written} bytes"

        if isinstance(command, SeekAbsolute):
            self.session.seek(command.offset)
            return f"{command.token}: seek succeeded"

        raise TypeError(f"Unsupported command {command!r}")

    def run(self, tokens: Iterable[str]) -> int:
        """
        Parse and execute each token in order.

        Tokens are parsed one at a time, so a malformed token only stops the
        run once every command before it has completed.

        Args:
            tokens (Iterable[str]): Command tokens.

        Returns:
            int: Number of commands executed.
        """

        count = 0
        for token in tokens:
            command = parse_command(token)
            Logger.debug(f"{token!r} at offset {self.session.cursor}")
            self.emit(self.execute(command))
            count += 1

        return count
