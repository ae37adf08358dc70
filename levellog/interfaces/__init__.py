"""Interface definitions for levellog adapters."""

from .i_log_sink import ILogSink

__all__ = [
    'ILogSink',
]
