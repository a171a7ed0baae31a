"""State shared by every logger handle bound to it: threshold, sink and write lock."""

import sys
import threading
import traceback

from simplelog.config import LoggerConfig, LogLevel
from simplelog.sinks import FileSink, MultiSink, StderrSink, StreamSink, as_sink
from simplelog.time import DateTracker, datetime_now


class SharedState:
    """The single source of truth for whether a line is emitted and where it goes.

    Level checks and formatting happen outside the lock; only the write to
    the sink (and fan-out composition) is serialized.
    """

    def __init__(
        self,
        output=None,
        level: LogLevel = LogLevel.TRACE,
        report_errors: bool = False,
        clock=datetime_now,
    ):
        """Initializes the SharedState.

        Args:
            output: The initial sink. Defaults to the current ``sys.stderr``.
            level (LogLevel): The minimum level that will be emitted.
                Defaults to LogLevel.TRACE.
            report_errors (bool): If True, print the traceback of a failed
                sink write to stderr. Defaults to False.
            clock (callable): Returns the current local datetime. Defaults
                to ``datetime.now``.

        """
        self._lock = threading.Lock()
        self._sink = StderrSink() if output is None else as_sink(output)
        self.level = level
        self.report_errors = report_errors
        self.clock = clock
        self.tracker = DateTracker()
        self.write_errors = 0

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "SharedState":
        """Build a state with the level and sink described by a config."""
        if config.output == "stderr":
            output = StderrSink()
        elif config.output == "stdout":
            output = StreamSink.stdout()
        else:
            output = FileSink(config.output, create=True)
        return cls(
            output=output,
            level=config.level,
            report_errors=config.report_errors,
        )

    @property
    def output(self):
        return self._sink

    def set_level(self, level: LogLevel) -> "SharedState":
        # Not validated; an out-of-range value mutes or unmutes everything.
        self.level = level
        return self

    def set_output(self, output) -> "SharedState":
        sink = as_sink(output)
        with self._lock:
            self._sink = sink
        return self

    def add_output(self, output) -> "SharedState":
        sink = as_sink(output)
        with self._lock:
            self._sink = MultiSink(self._sink, sink)
        return self

    def enabled(self, level: int) -> bool:
        return level >= self.level

    def stamp(self) -> str:
        return self.tracker.stamp(self.clock())

    def write(self, data) -> None:
        """Write to the sink under the lock. Sink errors are counted, never raised."""
        if isinstance(data, str):
            data = data.encode()
        with self._lock:
            try:
                self._sink.write(data)
            except Exception:
                self.write_errors += 1
                if self.report_errors:
                    traceback.print_exc(file=sys.stderr)


_default_state = None
_default_state_lock = threading.Lock()


def default_state() -> SharedState:
    """Return the process-wide state, creating it on first use."""
    global _default_state
    if _default_state is None:
        with _default_state_lock:
            if _default_state is None:
                _default_state = SharedState.from_config(LoggerConfig.default())
    return _default_state


def reset_default_state() -> None:
    """Drop the process-wide state so the next default_state() builds a fresh one."""
    global _default_state
    with _default_state_lock:
        _default_state = None
