"""In-memory logging adapter."""

import threading


class MemoryAdapter:
    """Adapter collecting log output in memory."""

    def __init__(self):
        self._data = bytearray()
        self._writes = 0
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        """Append log line to the buffer."""
        with self._lock:
            self._data += data
            self._writes += 1
        return len(data)

    @property
    def writes(self) -> int:
        """Number of write calls received."""
        return self._writes

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        with self._lock:
            return bytes(self._data)

    def lines(self) -> list[str]:
        """Return written output decoded and split into lines."""
        return self.getvalue().decode("utf-8").splitlines()

    def reset(self) -> None:
        """Discard collected output."""
        with self._lock:
            self._data.clear()
            self._writes = 0
