from simplelog.sinks.base import BaseSink


class MultiSink(BaseSink):
    """
    A fan-out sink that writes the same bytes to every underlying sink, in order.

    A failing sink does not stop the remaining ones; once every sink has
    been tried, the first error is re-raised.
    """

    def __init__(self, *sinks) -> None:
        self.sinks = []
        for sink in sinks:
            if isinstance(sink, MultiSink):
                self.sinks.extend(sink.sinks)
            else:
                self.sinks.append(sink)

    def write(self, data: bytes) -> None:
        first_error = None
        for sink in self.sinks:
            try:
                sink.write(data)
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def close(self) -> None:
        # Only sinks we built are ours to close; raw streams belong to the caller.
        for sink in self.sinks:
            if isinstance(sink, BaseSink):
                sink.close()
