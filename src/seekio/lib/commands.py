"""
Command tokens for seekio.

Each command-line argument after the file path is one token. Its first
character selects the operation and the rest is the operand:

- `r<length>` / `R<length>`: read as text / as hex
- `w<string>`: write the string verbatim
- `s<offset>`: seek to an absolute offset
"""

import os
from dataclasses import dataclass

from seekio.lib.errors import UsageError
from seekio.lib.numbers import NumberFlag, get_long

PREFIXES = "rRws"


@dataclass(frozen=True)
class ReadText:
    token: str
    length: int


@dataclass(frozen=True)
class ReadHex:
    token: str
    length: int


@dataclass(frozen=True)
class WriteLiteral:
    token: str
    data: bytes


@dataclass(frozen=True)
class SeekAbsolute:
    token: str
    offset: int


Command = ReadText | ReadHex | WriteLiteral | SeekAbsolute


def parse_command(token: str) -> Command:
    """
    Parse a single command token.

    Args:
        token (str): The raw command-line argument.

    Returns:
        Command: The parsed command.

    Raises:
        UsageError: If the token does not start with one of `r`, `R`, `w`, `s`.
        ParseError: If a length or offset operand is malformed.
    """

    prefix, operand = token[:1], token[1:]

    if prefix == "r":
        return ReadText(token, get_long(operand, NumberFlag.ANY_BASE | NumberFlag.NONNEG, token))
    if prefix == "R":
        return ReadHex(token, get_long(operand, NumberFlag.ANY_BASE | NumberFlag.NONNEG, token))
    if prefix == "w":
        # argv arrives decoded with surrogateescape; recover the original bytes
        return WriteLiteral(token, os.fsencode(operand))
    if prefix == "s":
        return SeekAbsolute(token, get_long(operand, NumberFlag.ANY_BASE, token))

    raise UsageError(f"Argument must start with [{PREFIXES}]: {token}")
