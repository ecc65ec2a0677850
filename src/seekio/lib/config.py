"""
Configuration management for seekio.

This module defines the `Config` singleton class, which loads settings from
a CFG file, applies type conversions, and exposes a `get` method for
retrieving values at runtime.
"""

import configparser
import os
from pathlib import Path
from typing import Any, ClassVar

from seekio.lib.errors import ParseError
from seekio.lib.logger import Logger
from seekio.lib.numbers import NumberFlag, get_int


class Config:
    """
    Singleton class to load and store configuration settings.

    Settings come from a `seekio.cfg` file when one is found; every key falls
    back to the built-in default.
    """

    _data: ClassVar[dict[str, dict[str, Any]] | None] = None
    _defaults: ClassVar[dict[str, dict[str, Any]]] = {
        "session": {"create_mode": "0666"},
        "copy": {"buffer_size": 1024},
        "dev": {
            "stack_trace_errors": False,
            "log_level": "info",
        },
    }

    # Special post-load normalizers for keys that need custom casting
    _NORMALIZERS = {
        ("session", "create_mode"): "_str_to_mode",
        ("copy", "buffer_size"): "_check_buffer_size",
        ("dev", "log_level"): "_str_to_level",
    }

    @classmethod
    def _resolve_config_path(cls) -> str | None:
        """Return a usable seekio.cfg path (env > repo > /etc) or None."""

        # ENV override
        env = os.getenv("SEEKIO_CONFIG")
        if env and Path(env).exists():
            return env

        # Repo location fallback
        dev = Path(__file__).resolve().parents[3] / "config" / "seekio.cfg"
        if dev.exists():
            return str(dev)

        # System-wide location fallback
        p = Path("/etc/seekio/seekio.cfg")
        if p.exists():
            return str(p)

        return None

    @classmethod
    def _apply_normalizers(cls, data: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        """Apply custom normalizers."""

        out = {s: dict(v) for s, v in data.items()}

        for (section, key), func in cls._NORMALIZERS.items():
            if isinstance(func, str):
                func = getattr(cls, func)
            if section in out and key in out[section]:
                out[section][key] = func(out[section][key])

        return out

    @classmethod
    def _str_to_level(cls, level: str | int) -> int:
        """Convert a log level str to its numeric value."""

        if isinstance(level, int):
            return level

        levels = {
            "success": Logger.SUCCESS,
            "info": Logger.INFO,
            "warning": Logger.WARNING,
            "error": Logger.ERROR,
            "debug": Logger.DEBUG,
        }

        if level not in levels:
            raise ValueError(f"The level {level} not a valid log level.")

        return levels[level]

    @classmethod
    def _str_to_mode(cls, mode: str | int) -> int:
        """Convert a permission string such as '0666' to file mode bits."""

        if isinstance(mode, int):
            return mode

        try:
            value = get_int(mode, NumberFlag.ANY_BASE | NumberFlag.NONNEG, "create_mode")
        except ParseError as err:
            raise ValueError(f"Invalid create_mode '{mode}': {err.reason.value}") from err

        if value > 0o7777:
            raise ValueError(f"Invalid create_mode '{mode}': not a permission mask.")

        return value

    @classmethod
    def _check_buffer_size(cls, size: int) -> int:
        if size <= 0:
            raise ValueError(f"Invalid buffer_size {size}: must be > 0.")
        return size

    @staticmethod
    def _coerce(default_value: Any, raw: str) -> Any:
        """Coerce a string 'raw' into the type of 'default_value'."""

        if raw == "" and default_value is not None:
            return default_value
        if isinstance(default_value, bool):
            return raw.lower() in ("1", "true", "yes", "on")
        if isinstance(default_value, int):
            return int(raw)
        if default_value is None:
            return None if raw == "" else raw

        return raw

    @classmethod
    def _load_defaults(cls) -> None:
        cls._data = cls._apply_normalizers(cls._defaults)

    @classmethod
    def load(cls, filepath: str | None = None) -> None:
        """
        Load the configuration from a file.

        Args:
            filepath (str, optional): Path to the configuration file. Resolved from the
                environment and the standard locations when omitted.
        """

        if filepath and not os.path.exists(filepath):
            Logger.warning(f"Config file '{filepath}' not found. Loading defaults...")
            cls._load_defaults()
            return

        filepath = filepath or cls._resolve_config_path()

        if not filepath:
            Logger.debug("No config file found. Loading defaults...")
            cls._load_defaults()
            return

        if not filepath.endswith(".cfg"):
            Logger.warning("Config path does not end with .cfg. Loading defaults...")
            cls._load_defaults()
            return

        cp = configparser.ConfigParser(
            interpolation=None,
            inline_comment_prefixes=("#", ";"),
            strict=True,
        )

        try:
            cp.read(filepath)
        except configparser.MissingSectionHeaderError:
            Logger.warning("Invalid config file. Loading defaults...")
            cls._load_defaults()
            return
        except configparser.Error as err:
            raise ValueError(f"Cannot parse '{filepath}': {err}") from err

        data = {s: dict(v) for s, v in cls._defaults.items()}
        for section, defaults in cls._defaults.items():
            if cp.has_section(section):
                resolved = {}
                for key, dval in defaults.items():
                    if cp.has_option(section, key):
                        raw = cp.get(section, key, raw=True).strip()
                        resolved[key] = cls._coerce(dval, raw)
                    else:
                        resolved[key] = dval
                data[section] = resolved

        cls._data = cls._apply_normalizers(data)
        Logger.debug(f"Loaded config from '{filepath}'.")

    @classmethod
    def get(cls, section: str, key: str, default: Any = None) -> Any:
        """
        Retrieve a configuration value.

        Args:
            section (str): The section in the CFG file to retrieve.
            key (str): The key to retrieve.
            default: The default value if the key is not found.

        Returns:
            Any: The configuration value or the default value.
        """

        if cls._data is None:
            raise RuntimeError("Configuration is not loaded. Call `Config.load(filepath)` first.")

        if section not in cls._data:
            return default

        return cls._data[section].get(key, default)
