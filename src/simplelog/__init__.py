"""Minimal leveled logging: named handles over one shared threshold and sink."""

from .config import (
    LoggerConfig as LoggerConfig,
)
from .config import (
    LogLevel as LogLevel,
)
from .config import (
    load_config as load_config,
)
from .errors import (
    LogPanic as LogPanic,
)
from .logger import (
    Logger as Logger,
)
from .logger import (
    new as new,
)
from .sinks import (
    BaseSink as BaseSink,
)
from .sinks import (
    FileSink as FileSink,
)
from .sinks import (
    MultiSink as MultiSink,
)
from .sinks import (
    StderrSink as StderrSink,
)
from .sinks import (
    StreamSink as StreamSink,
)
from .state import (
    SharedState as SharedState,
)
from .state import (
    default_state as default_state,
)
from .state import (
    reset_default_state as reset_default_state,
)

# NOTE: ZmqSink is only accessible by doing '.sinks.zmq'. This keeps pyzmq
#       off the import path for callers that only log to streams and files.
