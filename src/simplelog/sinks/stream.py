import io
import sys

from simplelog.sinks.base import BaseSink


class StreamSink(BaseSink):
    """
    A sink that writes to a text or binary stream and flushes after each write.
    """

    def __init__(self, stream=None, resolve=None) -> None:
        """
        Initialize the StreamSink.

        Args:
            stream: The stream to write to. Text streams receive the bytes
                decoded as UTF-8.
            resolve (callable, optional): Called on every write to look the
                stream up instead of holding it, so that a later
                reassignment of e.g. ``sys.stderr`` is honoured.

        Raises:
            ValueError: If neither or both of stream and resolve are given.
        """
        if (stream is None) == (resolve is None):
            raise ValueError("Invalid StreamSink; expected exactly one of stream or resolve")
        self._stream = stream
        self._resolve = resolve

    @classmethod
    def stdout(cls) -> "StreamSink":
        return cls(resolve=lambda: sys.stdout)

    @property
    def stream(self):
        if self._resolve is not None:
            return self._resolve()
        return self._stream

    def write(self, data: bytes) -> None:
        stream = self.stream
        if isinstance(data, str):
            data = data.encode()
        if isinstance(stream, io.TextIOBase):
            stream.write(data.decode("utf-8", errors="replace"))
        else:
            stream.write(data)
        stream.flush()


class StderrSink(StreamSink):
    """The default sink: whatever ``sys.stderr`` is at the time of writing."""

    def __init__(self) -> None:
        super().__init__(resolve=lambda: sys.stderr)
