"""Stream logging adapters."""

import sys
from typing import BinaryIO


class StreamAdapter:
    """Adapter for any binary file-like object."""

    def __init__(self, stream: BinaryIO, flush: bool = True):
        self.stream = stream
        self.flush = flush

    def write(self, data: bytes) -> int:
        """Write log line to the wrapped stream."""
        n = self.stream.write(data)
        if self.flush:
            self.stream.flush()
        return n


class StderrAdapter:
    """Adapter for the process standard error stream.

    sys.stderr is looked up on every write so that a replaced stream
    (redirection, test capture) is honored.
    """

    def write(self, data: bytes) -> int:
        """Write log line to stderr."""
        stream = sys.stderr
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            # Text layer may hold pending output (keep ordering)
            stream.flush()
            n = buffer.write(data)
            buffer.flush()
            return n
        n = stream.write(data.decode("utf-8", errors="replace"))
        stream.flush()
        return n
