"""Transport helpers for network sinks."""

from .zmq import (
    ZmqConnection as ZmqConnection,
)
from .zmq import (
    ZmqSocketType as ZmqSocketType,
)
