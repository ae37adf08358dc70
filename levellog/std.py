"""Shared default logger and module-level helpers.

The default Logger writes to standard error with date and time headers
and every severity enabled (LEVELLOG_FLAGS / LEVELLOG_LEVELS override
this). The functions below mirror the Logger methods and forward to the
current default instance; fatal* exit with status 1 and panic* raise
LogPanic after writing.
"""

from typing import Optional

from . import config
from .adapters import StderrAdapter
from .flags import Flag, Level, PREFIX_EMPTY
from .formatting import sprint, sprintf, sprintln
from .interfaces import ILogSink
from .logger import Logger

_std = Logger(
    StderrAdapter(),
    config.parse_flags(config.LEVELLOG_FLAGS),
    config.parse_levels(config.LEVELLOG_LEVELS),
)


def default() -> Logger:
    """Return the shared default logger."""
    return _std


def set_default(logger: Logger) -> Logger:
    """Install logger as the shared default; return the previous one."""
    global _std
    prev, _std = _std, logger
    return prev


def set_output(out: ILogSink) -> None:
    """Replace the default logger's sink."""
    _std.set_output(out)


def flags() -> Flag:
    """Return the default logger's header flags."""
    return _std.flags()


def set_flags(flags: int) -> None:
    """Set the default logger's header flags."""
    _std.set_flags(flags)


def levels() -> Level:
    """Return the default logger's severity mask."""
    return _std.levels()


def set_levels(levels: int) -> None:
    """Set the default logger's severity mask."""
    _std.set_levels(levels)


def output(calldepth: int, s: str) -> Optional[Exception]:
    """Logger.output on the default logger; calldepth 1 is this function's caller."""
    return _std.output(calldepth + 1, s, PREFIX_EMPTY)  # +1 for this frame


# Each helper calls the default logger's internals directly, so the frame
# count to the user's call matches the Logger methods.

def print(*args) -> Optional[Exception]:
    """Write args joined with no separators."""
    return _std.output(2, sprint(*args))


def printf(template: str, *args) -> Optional[Exception]:
    """Write template % args."""
    return _std.output(2, sprintf(template, *args))


def println(*args) -> Optional[Exception]:
    """Write args joined with spaces."""
    return _std.output(2, sprintln(*args))


def panic(*args) -> None:
    """Equivalent to print() followed by raising LogPanic."""
    _std._panic(sprint, args)


def panicf(template: str, *args) -> None:
    """Equivalent to printf() followed by raising LogPanic."""
    _std._panic(sprintf, (template,) + args)


def panicln(*args) -> None:
    """Equivalent to println() followed by raising LogPanic."""
    _std._panic(sprintln, args)


def debug(*args) -> Optional[Exception]:
    """Write args joined with no separators at DEBUG."""
    return _std._log(Level.DEBUG, sprint, args)


def debugf(template: str, *args) -> Optional[Exception]:
    """Write template % args at DEBUG."""
    return _std._log(Level.DEBUG, sprintf, (template,) + args)


def debugln(*args) -> Optional[Exception]:
    """Write args joined with spaces at DEBUG."""
    return _std._log(Level.DEBUG, sprintln, args)


def info(*args) -> Optional[Exception]:
    """Write args joined with no separators at INFO."""
    return _std._log(Level.INFO, sprint, args)


def infof(template: str, *args) -> Optional[Exception]:
    """Write template % args at INFO."""
    return _std._log(Level.INFO, sprintf, (template,) + args)


def infoln(*args) -> Optional[Exception]:
    """Write args joined with spaces at INFO."""
    return _std._log(Level.INFO, sprintln, args)


def warning(*args) -> Optional[Exception]:
    """Write args joined with no separators at WARNING."""
    return _std._log(Level.WARNING, sprint, args)


def warningf(template: str, *args) -> Optional[Exception]:
    """Write template % args at WARNING."""
    return _std._log(Level.WARNING, sprintf, (template,) + args)


def warningln(*args) -> Optional[Exception]:
    """Write args joined with spaces at WARNING."""
    return _std._log(Level.WARNING, sprintln, args)


def error(*args) -> Optional[Exception]:
    """Write args joined with no separators at ERROR."""
    return _std._log(Level.ERROR, sprint, args)


def errorf(template: str, *args) -> Optional[Exception]:
    """Write template % args at ERROR."""
    return _std._log(Level.ERROR, sprintf, (template,) + args)


def errorln(*args) -> Optional[Exception]:
    """Write args joined with spaces at ERROR."""
    return _std._log(Level.ERROR, sprintln, args)


def fatal(*args) -> None:
    """Write at FATAL, then exit the process with status 1."""
    _std._fatal(sprint, args)


def fatalf(template: str, *args) -> None:
    """Like fatal(), with template % args."""
    _std._fatal(sprintf, (template,) + args)


def fatalln(*args) -> None:
    """Like fatal(), with args joined by spaces."""
    _std._fatal(sprintln, args)
