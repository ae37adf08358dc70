"""Log sink interface (adapter pattern)."""

from typing import Any, Protocol


class ILogSink(Protocol):
    """Interface for log output: an append-only byte destination."""

    def write(self, data: bytes) -> Any:
        """Write one complete log line; raise OSError or ValueError on failure."""
        ...
