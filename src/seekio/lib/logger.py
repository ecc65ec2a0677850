"""
Logging for seekio.

This module defines the `Logger` singleton, a thin wrapper around the standard
`logging` module that prefixes each message with a colored status symbol.
Diagnostics go to stderr so that command reports on stdout stay clean.
"""

import logging

from colorama import Fore, Style


class Logger:
    """A singleton class for handling formatted and colored logging."""

    _logger = None

    SUCCESS = 25
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    DEBUG = logging.DEBUG

    @classmethod
    def _log(cls, level: int, message: str) -> None:
        """Write a log message based on log level."""

        if cls._logger is None:
            cls.setup(cls.INFO)

        symbols = {
            cls.SUCCESS: f"{Fore.GREEN}{Style.BRIGHT}[+]{Style.RESET_ALL}",
            cls.INFO: f"{Fore.BLUE}{Style.BRIGHT}[*]{Style.RESET_ALL}",
            cls.WARNING: f"{Fore.YELLOW}{Style.BRIGHT}[!]{Style.RESET_ALL}",
            cls.ERROR: f"{Fore.RED}{Style.BRIGHT}[-]{Style.RESET_ALL}",
            cls.DEBUG: f"{Fore.LIGHTBLACK_EX}{Style.BRIGHT}[>]{Style.RESET_ALL}",
        }

        cls._logger.log(level, f"{symbols[level]} {message}")

    @classmethod
    def set_level(cls, level: int) -> None:
        """
        Set a log level for the singleton.

        Args:
            level (int): The log level to set.
        """

        cls._logger.setLevel(level)

    @classmethod
    def setup(cls, log_level: int) -> None:
        """
        Set up the Logger singleton.

        Args:
            log_level (int): The log level to set.
        """

        cls._logger = logging.getLogger("seekio")
        cls._logger.setLevel(log_level)

        # Single stderr handler, message only
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        cls._logger.handlers.clear()
        cls._logger.addHandler(handler)

        logging.addLevelName(cls.SUCCESS, "SUCCESS")

    @classmethod
    def success(cls, message: str) -> None:
        """
        Log a success message.

        Args:
            message (str): The success message to log.
        """

        cls._log(cls.SUCCESS, message)

    @classmethod
    def info(cls, message: str) -> None:
        """
        Log an info message.

        Args:
            message (str): The info message to log.
        """

        cls._log(cls.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        """
        Log a warning message.

        Args:
            message (str): The warning message to log.
        """

        cls._log(cls.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        """
        Log an error message.

        Args:
            message (str): The error message to log.
        """

        cls._log(cls.ERROR, message)

    @classmethod
    def debug(cls, message: str) -> None:
        """
        Log a debug message.

        Args:
            message (str): The debug message to log.
        """

        cls._log(cls.DEBUG, message)
