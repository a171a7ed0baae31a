from abc import ABC, abstractmethod


class BaseSink(ABC):
    """
    Abstract base class for sinks, defining how rendered log lines
    reach their destination.

    Validation for any params/args should be done in '__init__'
    to catch config errors early.
    """

    @abstractmethod
    def write(self, data: bytes) -> None:
        """
        Write one chunk of rendered output.

        Args:
            data (bytes): The encoded line (or stack dump) to write.
        """
        pass

    def close(self) -> None:
        """Release any resources held by the sink."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
