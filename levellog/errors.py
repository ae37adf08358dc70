"""Exceptions raised by levellog."""


class LogPanic(Exception):
    """Raised by the panic family after the message has been written."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
