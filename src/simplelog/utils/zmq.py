import zmq

# Rebind it so its easier to understand and access as an Enum
from zmq.constants import SocketType as ZmqSocketType


class ZmqConnection:
    """
    A synchronous, outbound-only ZeroMQ connection used by network sinks.

    This class can either bind or connect to a specified endpoint and
    sends each payload as a single message. Receiving is left to whatever
    sits on the other end of the socket.
    """

    def __init__(
        self,
        socket_type=ZmqSocketType.PUB,
        path: str = "tcp://127.0.0.1:5555",
        bind: bool = True,
        snd_hwm: int = 100_000,
        linger_ms: int = 1000,
    ):
        """
        Initialize a ZMQ connection with customizable parameters.

        Args:
            socket_type (int, optional): An outbound ZMQ socket type from ZmqSocketType,
                e.g. ZmqSocketType.PUB or ZmqSocketType.PUSH. Defaults to ZmqSocketType.PUB.
            path (str, optional): The endpoint to bind or connect to, e.g. "tcp://127.0.0.1:5555".
                Defaults to "tcp://127.0.0.1:5555".
            bind (bool, optional): If True, call bind() on the socket; otherwise call connect().
                Defaults to True.
            snd_hwm (int, optional): High-water mark for sends. Defaults to 100,000.
            linger_ms (int, optional): How long pending messages may delay close().
                Defaults to 1000.

        Raises:
            ValueError: If the socket type cannot send.
        """
        if socket_type not in (
            ZmqSocketType.PUB,
            ZmqSocketType.XPUB,
            ZmqSocketType.PUSH,
            ZmqSocketType.DEALER,
            ZmqSocketType.PAIR,
        ):
            raise ValueError(
                f"Invalid socket type; expected an outbound type but got {socket_type}"
            )
        self.socket_type = socket_type
        self.path = path
        self.bind = bind
        self.snd_hwm = snd_hwm
        self.linger_ms = linger_ms

        self._context = None
        self._socket = None
        self._is_started = False

    def _ensure_started(self):
        """
        Ensure that the socket has started.
        """
        if not self._is_started:
            raise RuntimeError("Socket has not started; call '.start()' first")

    @property
    def is_started(self) -> bool:
        return self._is_started

    def start(self):
        """
        Create the context and socket, then either bind or connect.
        A stopped connection can be started again.

        Raises:
            RuntimeError: If a ZMQ error occurs, with details about the failure.
        """
        if self._is_started:
            return

        try:
            if self._context is None:
                self._context = zmq.Context()
            self._socket = self._context.socket(self.socket_type)
            self._socket.setsockopt(zmq.SNDHWM, self.snd_hwm)
            self._socket.setsockopt(zmq.LINGER, self.linger_ms)

            if self.bind:
                self._socket.bind(self.path)
            else:
                self._socket.connect(self.path)

            self._is_started = True
        except zmq.error.ZMQError as e:
            if self._socket is not None:
                self._socket.close()
                self._socket = None

            action = "binding to" if self.bind else "connecting to"
            raise RuntimeError(
                f"ZMQ error when {action} {self.path} with socket type {self.socket_type}: {str(e)}"
            ) from e

    def send(self, data: bytes):
        """
        Send data on this socket.

        Args:
            data (bytes): The data to send.

        Raises:
            RuntimeError: If the socket is not started.
        """
        self._ensure_started()
        self._socket.send(data, copy=True)

    def stop(self):
        """
        Close the socket and terminate the context.
        """
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        if self._context is not None:
            self._context.term()
            self._context = None
        self._is_started = False
