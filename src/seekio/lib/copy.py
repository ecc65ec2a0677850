"""
Bulk file copy for seekio.

`copy_file` streams one file into another in fixed-size chunks. The
destination is created or truncated with the same permission bits a
`FileSession` uses.
"""

import os

from seekio.lib.errors import IoError, ShortWriteError
from seekio.lib.logger import Logger
from seekio.lib.session import DEFAULT_CREATE_MODE

DEFAULT_BUFFER_SIZE = 1024


def copy_file(
    source: str,
    destination: str,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    mode: int = DEFAULT_CREATE_MODE,
) -> int:
    """
    Copy `source` to `destination` until end-of-file.

    Args:
        source (str): File to read.
        destination (str): File to create or truncate.
        buffer_size (int): Bytes per read.
        mode (int): Permission bits for a newly created destination.

    Returns:
        int: Total bytes copied.

    Raises:
        IoError: If any open, read, write or close fails.
        ShortWriteError: If a chunk is only partly written.
    """

    try:
        in_fd = os.open(source, os.O_RDONLY)
    except OSError as err:
        raise IoError("open", source, err) from err

    try:
        out_fd = os.open(destination, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, mode)
    except OSError as err:
        _close_after_error(in_fd, source)
        raise IoError("open", destination, err) from err

    try:
        total = _transfer(in_fd, out_fd, source, destination, buffer_size)
    except IoError:
        _close_after_error(out_fd, destination)
        _close_after_error(in_fd, source)
        raise

    try:
        _close(out_fd, destination)
    except IoError:
        _close_after_error(in_fd, source)
        raise

    _close(in_fd, source)

    Logger.debug(f"Copied {total} bytes from '{source}' to '{destination}'.")
    return total


def _transfer(in_fd: int, out_fd: int, source: str, destination: str, buffer_size: int) -> int:
    total = 0
    while True:
        try:
            chunk = os.read(in_fd, buffer_size)
        except OSError as err:
            raise IoError("read", source, err) from err

        if not chunk:
            return total

        try:
            written = os.write(out_fd, chunk)
        except OSError as err:
            raise IoError("write", destination, err) from err

        if written != len(chunk):
            raise ShortWriteError("write", destination, written, len(chunk))

        total += written


def _close(fd: int, path: str) -> None:
    try:
        os.close(fd)
    except OSError as err:
        raise IoError("close", path, err) from err


def _close_after_error(fd: int, path: str) -> None:
    # Report but let the error already in flight win
    try:
        _close(fd, path)
    except IoError as err:
        Logger.error(str(err))
