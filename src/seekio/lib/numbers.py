"""
Numeric argument parsing for seekio.

Operands are parsed the way C's `strtol()` reads them: optional leading
whitespace, an optional sign, then digits in the selected base. With
`NumberFlag.ANY_BASE` a `0x` prefix selects hex and a leading `0` selects
octal, so `16`, `020` and `0x10` all mean sixteen.
"""

from enum import IntFlag

from seekio.lib.errors import ParseError, ParseFailure

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_C_SPACE = " \t\n\v\f\r"


class NumberFlag(IntFlag):
    """Options controlling how `get_num` accepts an operand."""

    NONE = 0
    NONNEG = 0o1
    GT_0 = 0o2
    ANY_BASE = 0o100
    BASE_8 = 0o200
    BASE_16 = 0o400


def _base_for(flags: NumberFlag) -> int:
    if flags & NumberFlag.ANY_BASE:
        return 0
    if flags & NumberFlag.BASE_8:
        return 8
    if flags & NumberFlag.BASE_16:
        return 16
    return 10


def _digit_value(ch: str) -> int:
    idx = _DIGITS.find(ch.lower())
    return idx if idx >= 0 else 99


def _strtol(text: str, base: int) -> tuple[int | None, int]:
    """
    Scan an integer from the start of `text`.

    Returns:
        tuple[int | None, int]: The value (None if no digits were found) and the
            index of the first unconsumed character.
    """

    i = 0
    n = len(text)
    while i < n and text[i] in _C_SPACE:
        i += 1

    negative = False
    if i < n and text[i] in "+-":
        negative = text[i] == "-"
        i += 1

    # A 0x prefix only counts when a hex digit follows it
    has_hex_prefix = text[i : i + 2].lower() == "0x" and i + 2 < n and _digit_value(text[i + 2]) < 16
    if base in (0, 16) and has_hex_prefix:
        base = 16
        i += 2
    elif base == 0:
        base = 8 if i < n and text[i] == "0" else 10

    start = i
    value = 0
    while i < n and _digit_value(text[i]) < base:
        value = value * base + _digit_value(text[i])
        i += 1

    if i == start:
        return None, 0

    return (-value if negative else value), i


def get_num(
    arg: str | None,
    flags: NumberFlag = NumberFlag.NONE,
    name: str | None = None,
    fname: str = "get_num",
    allow_suffix: bool = False,
    minimum: int = LONG_MIN,
    maximum: int = LONG_MAX,
) -> int:
    """
    Convert a numeric command-line operand to an integer.

    Args:
        arg (str | None): The operand text.
        flags (NumberFlag): Base selection and sign constraints.
        name (str, optional): The argument the operand came from, for error messages.
        fname (str): Name reported in error messages.
        allow_suffix (bool): Accept trailing characters after the digits.
        minimum (int): Smallest representable value.
        maximum (int): Largest representable value.

    Returns:
        int: The parsed value.

    Raises:
        ParseError: If the operand is empty, has no digits, has trailing characters,
            is out of range, or violates `NONNEG`/`GT_0`.
    """

    if not arg:
        raise ParseError(fname, name, arg or "", ParseFailure.NOT_A_NUMBER)

    value, end = _strtol(arg, _base_for(flags))

    if value is None:
        raise ParseError(fname, name, arg, ParseFailure.NOT_A_NUMBER)
    if end != len(arg) and not allow_suffix:
        raise ParseError(fname, name, arg, ParseFailure.TRAILING_GARBAGE)
    if value < minimum or value > maximum:
        raise ParseError(fname, name, arg, ParseFailure.OUT_OF_RANGE)
    if flags & NumberFlag.NONNEG and value < 0:
        raise ParseError(fname, name, arg, ParseFailure.NEGATIVE)
    if flags & NumberFlag.GT_0 and value <= 0:
        raise ParseError(fname, name, arg, ParseFailure.NOT_POSITIVE)

    return value


def get_long(arg: str | None, flags: NumberFlag = NumberFlag.NONE, name: str | None = None) -> int:
    """Parse an operand that must fit a signed 64-bit offset or length."""

    return get_num(arg, flags, name, fname="get_long")


def get_int(arg: str | None, flags: NumberFlag = NumberFlag.NONE, name: str | None = None) -> int:
    """Parse an operand that must fit a signed 32-bit integer."""

    return get_num(arg, flags, name, fname="get_int", minimum=INT_MIN, maximum=INT_MAX)
