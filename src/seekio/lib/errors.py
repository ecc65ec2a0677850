"""
Error types for seekio.

Every fatal condition is raised as a `SeekioError` subclass at the point it is
detected and rendered to a single message by `str()` at the CLI boundary.
"""

import errno
from enum import Enum


class SeekioError(Exception):
    """Base class for all fatal seekio errors."""

    pass


class UsageError(SeekioError):
    """Raised for a bad argument count or an unrecognized command."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseFailure(Enum):
    """Why a numeric operand was rejected."""

    NOT_A_NUMBER = "not a number"
    TRAILING_GARBAGE = "nonnumeric characters"
    OUT_OF_RANGE = "value out of range"
    NEGATIVE = "negative value not allowed"
    NOT_POSITIVE = "value must be > 0"


class ParseError(SeekioError):
    """
    Raised when a numeric operand cannot be converted.

    Args:
        fname (str): Name of the parsing function that failed (e.g. "get_long").
        name (str): The argument the operand came from, usually the full command token.
        arg (str): The offending operand text.
        reason (ParseFailure): Classification of the failure.
    """

    def __init__(self, fname: str, name: str, arg: str, reason: ParseFailure):
        self.fname = fname
        self.name = name
        self.arg = arg
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f" (in {self.name})" if self.name else ""
        text = f"{self.fname} error{where}: {self.reason.value}"
        if self.arg:
            text += f"\n        offending text: {self.arg}"
        return text


class IoError(SeekioError):
    """
    Raised when an operating system call on a file fails.

    Args:
        operation (str): The failed call (e.g. "open", "read", "lseek").
        target (str): The path the call was made against.
        cause (BaseException, optional): The underlying exception.
    """

    def __init__(self, operation: str, target: str, cause: BaseException | None = None):
        self.operation = operation
        self.target = target
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        if isinstance(self.cause, OSError) and self.cause.errno is not None:
            code = errno.errorcode.get(self.cause.errno, "?UNKNOWN?")
            return f"ERROR [{code} {self.cause.strerror}] {self.operation} '{self.target}'"
        if isinstance(self.cause, MemoryError):
            return f"ERROR [ENOMEM Cannot allocate memory] {self.operation} '{self.target}'"
        if self.cause is not None:
            return f"ERROR [{self.cause}] {self.operation} '{self.target}'"
        return f"ERROR {self.operation} '{self.target}'"


class ShortWriteError(IoError):
    """Raised when a write transfers fewer bytes than requested."""

    def __init__(self, operation: str, target: str, written: int, expected: int):
        self.written = written
        self.expected = expected
        super().__init__(operation, target)

    def __str__(self) -> str:
        return (
            f"{self.operation} '{self.target}': partial write "
            f"({self.written} of {self.expected} bytes)"
        )
