"""Configuration classes and enums for simplelog."""

import os
from enum import IntEnum
from pathlib import Path
from typing import Self

import msgspec
from msgspec import Struct

_TRUTHY = {"1", "true", "yes"}


class LogLevel(IntEnum):
    """Log level enumeration."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5
    PANIC = 6

    @classmethod
    def parse(cls, value: "LogLevel | int | str") -> "LogLevel":
        """Resolve a level from a member, an int, a digit string or a name.

        Args:
            value: The level to resolve. Names are case-insensitive and
                "warning" is accepted as an alias of "warn".

        Raises:
            ValueError: If the value does not name a known level.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        text = value.strip()
        if text.isdigit():
            return cls(int(text))
        name = text.upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Invalid log level; got '{value}'") from None


class LoggerConfig(Struct, kw_only=True):
    """Configuration for a shared state and the handles built from it."""

    # Files may name the level ("warn") or give its number.
    level: LogLevel | str = LogLevel.TRACE
    output: str = "stderr"
    color: bool = False
    escape_newline: bool = False
    report_errors: bool = False

    def __post_init__(self):
        """Resolve the level and validate the output target."""
        self.level = LogLevel.parse(self.level)
        if not self.output:
            raise ValueError("Invalid output; expected 'stderr', 'stdout' or a file path")

    @classmethod
    def default(cls) -> Self:
        """Return trace level output to stderr, without color or escaping."""
        return cls()

    @classmethod
    def from_env(cls, environ=None) -> Self:
        """Build a config from SIMPLELOG_* environment variables.

        Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        kwargs = {}

        level = environ.get("SIMPLELOG_LEVEL")
        if level:
            kwargs["level"] = LogLevel.parse(level)

        output = environ.get("SIMPLELOG_OUTPUT")
        if output:
            kwargs["output"] = output

        for field in ("color", "escape_newline", "report_errors"):
            raw = environ.get(f"SIMPLELOG_{field.upper()}")
            if raw is not None:
                kwargs[field] = raw.strip().lower() in _TRUTHY

        return cls(**kwargs)


def load_config(path: str | os.PathLike) -> LoggerConfig:
    """Decode a LoggerConfig from a .json or .toml file.

    The level may be given as a number or as a name, e.g. "warn".

    Raises:
        ValueError: If the file suffix is not supported.
        msgspec.ValidationError: If the contents do not match the schema.

    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return msgspec.json.decode(path.read_bytes(), type=LoggerConfig)
    if suffix == ".toml":
        return msgspec.toml.decode(path.read_bytes(), type=LoggerConfig)
    raise ValueError(f"Invalid config file; expected .json or .toml but got '{path}'")
