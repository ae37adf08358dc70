"""Adapter implementations for log sinks."""

from .stream_adapter import StreamAdapter, StderrAdapter
from .memory_adapter import MemoryAdapter

__all__ = [
    'StreamAdapter',
    'StderrAdapter',
    'MemoryAdapter',
]
