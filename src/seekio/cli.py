#!/usr/bin/env python3
import argparse
import sys

from seekio import __version__
from seekio.lib.commands import PREFIXES
from seekio.lib.config import Config
from seekio.lib.copy import DEFAULT_BUFFER_SIZE, copy_file
from seekio.lib.errors import ParseError, SeekioError, UsageError
from seekio.lib.interpreter import Interpreter
from seekio.lib.logger import Logger
from seekio.lib.session import DEFAULT_CREATE_MODE, FileSession

RUN_USAGE = "%(prog)s [-c CONFIG] file {r<length>|R<length>|w<string>|s<offset>}..."
COPY_USAGE = "%(prog)s [-c CONFIG] old-file new-file"


def _build_parser() -> argparse.ArgumentParser:
    """Build the parser for the `seekio` command."""

    parser = argparse.ArgumentParser(
        prog="seekio",
        usage=RUN_USAGE,
        description=f"Run commands starting with one of [{PREFIXES}] against a file.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print usage and exit")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-c", "--config", help="Path to a seekio.cfg file")
    parser.add_argument("path", nargs="?", help="File to open, created if absent")
    parser.add_argument("commands", nargs="*", help="Commands to run, in order")
    parser.set_defaults(handler=cmd_run)

    return parser


def _build_copy_parser() -> argparse.ArgumentParser:
    """Build the parser for the `seekio-copy` command."""

    parser = argparse.ArgumentParser(
        prog="seekio-copy",
        usage=COPY_USAGE,
        description="Copy a file in fixed-size chunks.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print usage and exit")
    parser.add_argument("-c", "--config", help="Path to a seekio.cfg file")
    parser.add_argument("paths", nargs="*", help="Source and destination")
    parser.set_defaults(handler=cmd_copy)

    return parser


def cmd_run(ns: argparse.Namespace) -> int:
    """
    Open the file and run every command against it.

    Args:
        ns (argparse.Namespace): Parsed arguments with `path` and `commands`.

    Returns:
        int: Process exit code (0 on success).
    """

    if ns.path is None or not ns.commands:
        raise UsageError("Expected a file and at least one command.")

    mode = Config.get("session", "create_mode", DEFAULT_CREATE_MODE)
    with FileSession.open(ns.path, mode) as session:
        count = Interpreter(session).run(ns.commands)

    Logger.debug(f"Ran {count} commands on '{ns.path}'.")
    return 0


def cmd_copy(ns: argparse.Namespace) -> int:
    """
    Copy the first path to the second.

    Args:
        ns (argparse.Namespace): Parsed arguments with exactly two `paths`.

    Returns:
        int: Process exit code (0 on success).
    """

    if len(ns.paths) != 2:
        raise UsageError("Expected exactly two files.")

    source, destination = ns.paths
    Logger.info(f"Copying '{source}' to '{destination}'...")
    total = copy_file(
        source,
        destination,
        buffer_size=Config.get("copy", "buffer_size", DEFAULT_BUFFER_SIZE),
        mode=Config.get("session", "create_mode", DEFAULT_CREATE_MODE),
    )

    Logger.success(f"Copied {total} bytes to '{destination}'.")
    return 0


def _dispatch(parser: argparse.ArgumentParser, argv: list[str] | None) -> int:
    """Parse arguments, load configuration and run the selected handler."""

    Logger.setup(Logger.INFO)

    ns = parser.parse_intermixed_args(argv)
    if ns.help:
        parser.print_usage(sys.stderr)
        return 1

    try:
        Config.load(ns.config)
    except ValueError as e:
        Logger.error(f"Invalid configuration: {e}")
        return 1
    Logger.set_level(Config.get("dev", "log_level", Logger.INFO))

    if Config.get("dev", "stack_trace_errors", False):
        Logger.debug("Stack trace errors enabled.")

    try:
        return ns.handler(ns)
    except (UsageError, ParseError) as e:
        if Config.get("dev", "stack_trace_errors", False):
            raise
        Logger.error(str(e))
        parser.print_usage(sys.stderr)
        return 1
    except SeekioError as e:
        if Config.get("dev", "stack_trace_errors", False):
            raise
        Logger.error(str(e))
        return 1


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `seekio` CLI.

    Args:
        argv (list[str] | None): Arguments excluding the executable; if None, uses sys.argv[1:].

    Returns:
        int: Process exit code.
    """

    return _dispatch(_build_parser(), argv)


def copy_main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `seekio-copy` CLI.

    Args:
        argv (list[str] | None): Arguments excluding the executable; if None, uses sys.argv[1:].

    Returns:
        int: Process exit code.
    """

    return _dispatch(_build_copy_parser(), argv)


if __name__ == "__main__":
    sys.exit(main())
