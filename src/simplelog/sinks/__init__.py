import io

from .base import BaseSink as BaseSink
from .file import FileSink as FileSink
from .multi import MultiSink as MultiSink
from .stream import StderrSink as StderrSink
from .stream import StreamSink as StreamSink


def as_sink(target):
    """Normalize a write destination into something accepting bytes.

    Sinks pass through, text streams are wrapped in a StreamSink, and any
    other object with a ``write`` method is assumed to take bytes.

    Raises:
        TypeError: If the target has no ``write`` method.

    """
    if isinstance(target, BaseSink):
        return target
    if isinstance(target, io.TextIOBase):
        return StreamSink(target)
    if not callable(getattr(target, "write", None)):
        raise TypeError(
            f"Invalid sink; expected an object with a write method but got {type(target)}"
        )
    return target


__all__ = [
    "BaseSink",
    "FileSink",
    "MultiSink",
    "StderrSink",
    "StreamSink",
    "as_sink",
]
