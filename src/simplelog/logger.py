"""Logger handles: per call-site banner and rendering flags over a shared state."""

import os
import traceback

from simplelog.config import LoggerConfig, LogLevel
from simplelog.errors import LogPanic
from simplelog.formatting import (
    escape_newlines,
    format_operands,
    join_operands,
    level_tag,
    render_line,
)
from simplelog.state import SharedState, default_state

# Ends the whole process from any thread, skipping finally blocks and atexit hooks.
_exit = os._exit


class Logger:
    """A lightweight handle routing formatted lines through a SharedState.

    Many handles may share one state; the level and the output live there,
    while banner, color and newline escaping belong to each handle.
    """

    def __init__(
        self,
        banner: str = "",
        color: bool = False,
        escape_newline: bool = False,
        state: SharedState | None = None,
    ):
        """Initializes a Logger.

        Args:
            banner (str): Label inserted after the timestamp, stored as given.
                Use set_banner() to have it bracketed.
            color (bool): Render severity tags with ANSI colors.
            escape_newline (bool): Replace newlines in messages with a
                visible escape marker.
            state (SharedState, optional): The state to bind to. Defaults to
                the process-wide state.

        """
        self._state = default_state() if state is None else state
        self._banner = banner
        self._color = color
        self._escape_newline = escape_newline

    @classmethod
    def from_config(
        cls,
        config: LoggerConfig,
        banner: str = "",
        state: SharedState | None = None,
    ) -> "Logger":
        """Build a handle whose flags come from a config.

        Without an explicit state a fresh one is built from the same config.
        """
        if state is None:
            state = SharedState.from_config(config)
        logger = cls(
            color=config.color,
            escape_newline=config.escape_newline,
            state=state,
        )
        return logger.set_banner(banner)

    @property
    def state(self) -> SharedState:
        return self._state

    @property
    def level(self):
        return self._state.level

    @property
    def banner(self) -> str:
        return self._banner

    @property
    def color(self) -> bool:
        return self._color

    @property
    def escape_newline(self) -> bool:
        return self._escape_newline

    def set_output(self, output) -> "Logger":
        """Replace the shared sink; affects every handle on this state."""
        self._state.set_output(output)
        return self

    def add_output(self, output) -> "Logger":
        """Fan the shared sink out to one more destination."""
        self._state.add_output(output)
        return self

    def set_level(self, level: LogLevel) -> "Logger":
        """Set the shared minimum level; affects every handle on this state."""
        self._state.set_level(level)
        return self

    def set_banner(self, banner: str) -> "Logger":
        if banner and not banner.startswith("["):
            banner = "[" + banner
        if banner and not banner.endswith("]"):
            banner = banner + "]"
        self._banner = banner
        return self

    def set_escape_newline(self, escape: bool) -> "Logger":
        self._escape_newline = escape
        return self

    def set_color(self, color: bool) -> "Logger":
        self._color = color
        return self

    def format(self, level: LogLevel, message: str) -> str:
        """Render one complete line, stamping the shared date tracker."""
        if self._escape_newline:
            message = escape_newlines(message)
        tag = level_tag(level, self._color)
        return render_line(tag, self._state.stamp(), self._banner, message)

    def output(self, text) -> None:
        """Write raw text through the shared state, without formatting."""
        self._state.write(text)

    def emit(self, level: LogLevel, *values) -> None:
        """Format and write at any level, bypassing the level check."""
        self.output(self.format(level, join_operands(values)))

    def emitf(self, level: LogLevel, fmt: str, *args) -> None:
        """Like emit(), with a %-style format string."""
        self.output(self.format(level, format_operands(fmt, args)))

    def _enabled(self, level: LogLevel) -> bool:
        return self._state.enabled(level)

    def trace(self, *values) -> None:
        if not self._enabled(LogLevel.TRACE):
            return
        self.emit(LogLevel.TRACE, *values)

    def tracef(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.TRACE):
            return
        self.emitf(LogLevel.TRACE, fmt, *args)

    def debug(self, *values) -> None:
        if not self._enabled(LogLevel.DEBUG):
            return
        self.emit(LogLevel.DEBUG, *values)

    def debugf(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.DEBUG):
            return
        self.emitf(LogLevel.DEBUG, fmt, *args)

    def info(self, *values) -> None:
        if not self._enabled(LogLevel.INFO):
            return
        self.emit(LogLevel.INFO, *values)

    def infof(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.INFO):
            return
        self.emitf(LogLevel.INFO, fmt, *args)

    def warn(self, *values) -> None:
        if not self._enabled(LogLevel.WARN):
            return
        self.emit(LogLevel.WARN, *values)

    def warnf(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.WARN):
            return
        self.emitf(LogLevel.WARN, fmt, *args)

    warning = warn
    warningf = warnf

    def error(self, *values) -> None:
        if not self._enabled(LogLevel.ERROR):
            return
        self.emit(LogLevel.ERROR, *values)

    def errorf(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.ERROR):
            return
        self.emitf(LogLevel.ERROR, fmt, *args)

    def fatal(self, *values) -> None:
        """Emit a fatal line, then end the process with status 1."""
        if not self._enabled(LogLevel.FATAL):
            return
        self.emit(LogLevel.FATAL, *values)
        _exit(1)

    def fatalf(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.FATAL):
            return
        self.emitf(LogLevel.FATAL, fmt, *args)
        _exit(1)

    def panic(self, *values) -> None:
        """Emit a panic line, then raise LogPanic carrying the message.

        Raises:
            LogPanic: Always, once the line has been written.

        """
        if not self._enabled(LogLevel.PANIC):
            return
        message = join_operands(values)
        self.output(self.format(LogLevel.PANIC, message))
        raise LogPanic(message)

    def panicf(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.PANIC):
            return
        message = format_operands(fmt, args)
        self.output(self.format(LogLevel.PANIC, message))
        raise LogPanic(message)

    def fake_panic(self, *values) -> None:
        """Emit a panic line followed by the current stack, without raising."""
        if not self._enabled(LogLevel.PANIC):
            return
        self.emit(LogLevel.PANIC, *values)
        self.output("".join(traceback.format_stack()))

    def fake_panicf(self, fmt: str, *args) -> None:
        if not self._enabled(LogLevel.PANIC):
            return
        self.emitf(LogLevel.PANIC, fmt, *args)
        self.output("".join(traceback.format_stack()))


def new(
    banner: str = "",
    color: bool = False,
    escape_newline: bool = False,
    state: SharedState | None = None,
) -> Logger:
    """Create a handle bound to the process-wide state (or the given one)."""
    return Logger(banner, color, escape_newline, state=state)
