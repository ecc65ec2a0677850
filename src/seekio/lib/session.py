"""
File session for seekio.

A `FileSession` owns the single open descriptor a run works on. It performs
raw `os.read`/`os.write`/`os.lseek` calls and mirrors the descriptor's offset
in an explicit `cursor` field, so callers can inspect the position without
asking the OS.
"""

import errno
import os

from seekio.lib.errors import IoError, ShortWriteError
from seekio.lib.logger import Logger

DEFAULT_CREATE_MODE = 0o666  # rw-rw-rw-


class FileSession:
    """
    An open read-write handle on one regular file plus its cursor.

    Use `FileSession.open()` to create one, and close it exactly once, either
    with `close()` or by using the session as a context manager.
    """

    def __init__(self, path: str, fd: int, cursor: int = 0):
        """
        Wrap an already open descriptor.

        Args:
            path (str): Path the descriptor was opened from, used in error messages.
            fd (int): The open file descriptor.
            cursor (int): Current offset of the descriptor.
        """

        self.path = path
        self.fd: int | None = fd
        self.cursor = cursor

    @classmethod
    def open(cls, path: str, mode: int = DEFAULT_CREATE_MODE) -> "FileSession":
        """
        Open `path` read-write, creating it with `mode` if absent.

        Raises:
            IoError: If the file cannot be opened.
        """

        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, mode)
        except OSError as err:
            raise IoError("open", path, err) from err

        Logger.debug(f"Opened '{path}' (fd {fd}).")
        return cls(path, fd)

    def _require_open(self, operation: str) -> int:
        if self.fd is None:
            raise IoError(operation, self.path, OSError(errno.EBADF, os.strerror(errno.EBADF)))
        return self.fd

    def read(self, length: int) -> bytes:
        """
        Read up to `length` bytes at the cursor and advance it by the amount read.

        A short result means end-of-file was reached; it is not retried.

        Raises:
            IoError: If the read fails or the buffer cannot be allocated.
        """

        fd = self._require_open("read")
        try:
            data = os.read(fd, length)
        except (OSError, MemoryError, OverflowError) as err:
            raise IoError("read", self.path, err) from err

        self.cursor += len(data)
        return data

    def write(self, data: bytes) -> int:
        """
        Write `data` at the cursor and advance it by the amount written.

        Raises:
            IoError: If the write fails.
            ShortWriteError: If fewer than `len(data)` bytes were written.
        """

        fd = self._require_open("write")
        try:
            written = os.write(fd, data)
        except OSError as err:
            raise IoError("write", self.path, err) from err

        self.cursor += written
        if written != len(data):
            raise ShortWriteError("write", self.path, written, len(data))

        return written

    def seek(self, offset: int) -> int:
        """
        Move the cursor to the absolute `offset`.

        Offsets past end-of-file are legal. Negative offsets are handed to
        `lseek`, which rejects them.

        Raises:
            IoError: If the positioning call fails.
        """

        fd = self._require_open("lseek")
        try:
            self.cursor = os.lseek(fd, offset, os.SEEK_SET)
        except (OSError, OverflowError) as err:
            raise IoError("lseek", self.path, err) from err

        return self.cursor

    @property
    def closed(self) -> bool:
        return self.fd is None

    def close(self) -> None:
        """
        Close the descriptor. Later calls do nothing.

        Raises:
            IoError: If the close call fails.
        """

        if self.fd is None:
            return

        fd, self.fd = self.fd, None
        try:
            os.close(fd)
        except OSError as err:
            raise IoError("close", self.path, err) from err

        Logger.debug(f"Closed '{self.path}'.")

    def __enter__(self) -> "FileSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            self.close()
        except IoError as err:
            # Report but let the error already in flight win
            if exc_val is None:
                raise
            Logger.error(str(err))

        return False
