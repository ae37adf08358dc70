"""Leveled text logger.

Logger formats lines as

    [severity prefix][date ][time[.microseconds] ][file:line: ]message

and writes each one to its sink in a single call. The std module holds a
shared default logger on stderr with module-level helpers.
"""

from . import std
from .adapters import MemoryAdapter, StderrAdapter, StreamAdapter
from .errors import LogPanic
from .flags import Flag, Level, PREFIXES, STD_FLAGS
from .interfaces import ILogSink
from .logger import CALLDEPTH, Logger

__version__ = "0.1.0"

__all__ = [
    'CALLDEPTH',
    'Flag',
    'ILogSink',
    'Level',
    'LogPanic',
    'Logger',
    'MemoryAdapter',
    'PREFIXES',
    'STD_FLAGS',
    'StderrAdapter',
    'StreamAdapter',
    'std',
]
