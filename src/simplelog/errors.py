"""Exceptions raised by simplelog."""


class LogPanic(BaseException):
    """Raised by Logger.panic after the panic line has been written.

    Derives from BaseException so that generic ``except Exception`` blocks
    do not absorb it; callers that want to recover must catch it by name.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
