from simplelog.sinks.base import BaseSink
from simplelog.utils.zmq import ZmqConnection, ZmqSocketType


class ZmqSink(BaseSink):
    """
    A sink that publishes each write as one message on a ZeroMQ socket.
    """

    def __init__(
        self,
        path: str,
        bind: bool = True,
        socket_type=ZmqSocketType.PUB,
    ) -> None:
        """
        Initialize the ZmqSink and start its socket.

        Args:
            path (str): The endpoint path (e.g. "ipc:///some/path.ipc",
                "tcp://127.0.0.1:5556", or "inproc://logger").
            bind (bool, optional): Bind if True, connect otherwise. Defaults to True.
            socket_type (optional): Outbound socket type. Defaults to PUB.
        """
        self.path = path

        # Any formatting issues with the path will be thrown within the ZmqConnection
        # constructor by ZMQ, so we don't need to handle it beforehand.
        self.connection = ZmqConnection(
            socket_type=socket_type,
            path=self.path,
            bind=bind,
        )
        self.connection.start()

    def write(self, data: bytes) -> None:
        if isinstance(data, str):
            data = data.encode()
        self.connection.send(data)

    def close(self) -> None:
        if self.connection.is_started:
            self.connection.stop()
