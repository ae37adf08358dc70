"""Leveled logger core.

A Logger turns a message plus a severity prefix into one line written to
its sink. Each logging operation makes a single call to the sink's write
method, and a Logger may be used from many threads at once: writes are
serialized by a per-instance lock.

Severity-named operations (debug, info, warning, error, fatal) are gated
by the instance's level mask before any formatting work is done. The
print and panic families are never gated.
"""

import sys
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from .errors import LogPanic
from .flags import Flag, Level, PREFIXES, PREFIX_EMPTY, STD_FLAGS
from .formatting import encode, format_header, sprint, sprintf, sprintln
from .interfaces import ILogSink

# Frames between output() and the user's call: _log -> public method -> caller
CALLDEPTH = 3

FATAL_EXIT_CODE = 1

UNKNOWN_FILE = "???"


def _caller(depth: int) -> tuple[str, int]:
    """Return (file, line) depth frames above the caller of this function."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return UNKNOWN_FILE, 0
    return frame.f_code.co_filename, frame.f_lineno


class Logger:
    """Leveled logger writing formatted lines to a sink."""

    def __init__(
        self,
        out: ILogSink,
        flags: int = STD_FLAGS,
        levels: int = Level.ALL
    ):
        self._lock = threading.Lock()
        self._out = out
        self._flags = Flag(flags)
        self._levels = Level(levels)
        self._buf = bytearray()

    # Configuration

    def flags(self) -> Flag:
        """Return the header flags."""
        with self._lock:
            return self._flags

    def set_flags(self, flags: int) -> None:
        """Set the header flags."""
        with self._lock:
            self._flags = Flag(flags)

    def levels(self) -> Level:
        """Return the enabled severity mask."""
        with self._lock:
            return self._levels

    def set_levels(self, levels: int) -> None:
        """Set the enabled severity mask."""
        with self._lock:
            self._levels = Level(levels)

    def output_sink(self) -> ILogSink:
        """Return the current sink."""
        with self._lock:
            return self._out

    def set_output(self, out: ILogSink) -> None:
        """Replace the sink for all subsequent lines."""
        with self._lock:
            self._out = out

    def ignore(self, level: int) -> bool:
        """Return True if lines at level are suppressed."""
        return (self._levels & level) == 0

    # Emission

    def output(
        self, calldepth: int, s: str, prefix: str = PREFIX_EMPTY
    ) -> Optional[Exception]:
        """Write one log line and return the sink's write error, if any.

        OSError and ValueError (closed file) from the sink are returned;
        anything else propagates.

        calldepth counts the frames to skip when resolving file and line
        for LONGFILE/SHORTFILE; 1 attributes the line to the caller of
        output. A newline is appended unless s already ends with one.
        """
        now = datetime.now(timezone.utc)
        with self._lock:
            flags = self._flags
        file, line = UNKNOWN_FILE, 0
        if flags & (Flag.SHORTFILE | Flag.LONGFILE):
            # Stack walk happens outside the lock
            file, line = _caller(calldepth)

        with self._lock:
            buf = self._buf
            buf.clear()
            format_header(buf, self._flags, prefix, now, file, line)
            buf += encode(s)
            if not s.endswith("\n"):
                buf += b"\n"
            try:
                self._out.write(bytes(buf))
            except (OSError, ValueError) as err:
                return err
        return None

    def _log(
        self,
        level: Level,
        fmt: Callable[..., str],
        args: tuple,
        calldepth: int = CALLDEPTH
    ) -> Optional[Exception]:
        if self.ignore(level):
            return None
        return self.output(calldepth, fmt(*args), PREFIXES[level])

    def _fatal(
        self,
        fmt: Callable[..., str],
        args: tuple,
        calldepth: int = CALLDEPTH
    ) -> None:
        if self.ignore(Level.FATAL):
            return
        try:
            self.output(calldepth, fmt(*args), PREFIXES[Level.FATAL])
        finally:
            sys.exit(FATAL_EXIT_CODE)

    def _panic(
        self,
        fmt: Callable[..., str],
        args: tuple,
        calldepth: int = CALLDEPTH
    ) -> None:
        s = fmt(*args)
        try:
            self.output(calldepth, s)
        finally:
            raise LogPanic(s)

    # Unleveled

    def print(self, *args) -> Optional[Exception]:
        """Write args joined with no separators."""
        return self.output(CALLDEPTH - 1, sprint(*args))

    def printf(self, template: str, *args) -> Optional[Exception]:
        """Write template % args."""
        return self.output(CALLDEPTH - 1, sprintf(template, *args))

    def println(self, *args) -> Optional[Exception]:
        """Write args joined with spaces."""
        return self.output(CALLDEPTH - 1, sprintln(*args))

    def panic(self, *args) -> None:
        """Equivalent to print() followed by raising LogPanic."""
        self._panic(sprint, args)

    def panicf(self, template: str, *args) -> None:
        """Equivalent to printf() followed by raising LogPanic."""
        self._panic(sprintf, (template,) + args)

    def panicln(self, *args) -> None:
        """Equivalent to println() followed by raising LogPanic."""
        self._panic(sprintln, args)

    # Leveled

    def debug(self, *args) -> Optional[Exception]:
        """Write args joined with no separators at DEBUG."""
        return self._log(Level.DEBUG, sprint, args)

    def debugf(self, template: str, *args) -> Optional[Exception]:
        """Write template % args at DEBUG."""
        return self._log(Level.DEBUG, sprintf, (template,) + args)

    def debugln(self, *args) -> Optional[Exception]:
        """Write args joined with spaces at DEBUG."""
        return self._log(Level.DEBUG, sprintln, args)

    def info(self, *args) -> Optional[Exception]:
        """Write args joined with no separators at INFO."""
        return self._log(Level.INFO, sprint, args)

    def infof(self, template: str, *args) -> Optional[Exception]:
        """Write template % args at INFO."""
        return self._log(Level.INFO, sprintf, (template,) + args)

    def infoln(self, *args) -> Optional[Exception]:
        """Write args joined with spaces at INFO."""
        return self._log(Level.INFO, sprintln, args)

    def warning(self, *args) -> Optional[Exception]:
        """Write args joined with no separators at WARNING."""
        return self._log(Level.WARNING, sprint, args)

    def warningf(self, template: str, *args) -> Optional[Exception]:
        """Write template % args at WARNING."""
        return self._log(Level.WARNING, sprintf, (template,) + args)

    def warningln(self, *args) -> Optional[Exception]:
        """Write args joined with spaces at WARNING."""
        return self._log(Level.WARNING, sprintln, args)

    def error(self, *args) -> Optional[Exception]:
        """Write args joined with no separators at ERROR."""
        return self._log(Level.ERROR, sprint, args)

    def errorf(self, template: str, *args) -> Optional[Exception]:
        """Write template % args at ERROR."""
        return self._log(Level.ERROR, sprintf, (template,) + args)

    def errorln(self, *args) -> Optional[Exception]:
        """Write args joined with spaces at ERROR."""
        return self._log(Level.ERROR, sprintln, args)

    def fatal(self, *args) -> None:
        """Write at FATAL, then exit the process with status 1."""
        self._fatal(sprint, args)

    def fatalf(self, template: str, *args) -> None:
        """Like fatal(), with template % args."""
        self._fatal(sprintf, (template,) + args)

    def fatalln(self, *args) -> None:
        """Like fatal(), with args joined by spaces."""
        self._fatal(sprintln, args)
