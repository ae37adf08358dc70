"""Header flags and severity levels."""

from enum import IntFlag


class Flag(IntFlag):
    """Bits or'ed together to control which header fields are printed.

    Field order is fixed (date, time, file:line) and not configurable.
    Flags DATE | TIME (STD_FLAGS) produce

        2009/01/23 01:23:23 message

    while DATE | TIME | MICROSECONDS | LONGFILE produce

        2009/01/23 01:23:23.123123 /a/b/c/d.py:23: message
    """
    NONE = 0
    DATE = 1 << 0          # local date: 2009/01/23
    TIME = 1 << 1          # local time: 01:23:23
    MICROSECONDS = 1 << 2  # 01:23:23.123123, assumes TIME
    LONGFILE = 1 << 3      # full file name and line: /a/b/c/d.py:23
    SHORTFILE = 1 << 4     # final path element and line: d.py:23, overrides LONGFILE
    UTC = 1 << 5           # if DATE or TIME is set, use UTC instead of local zone


STD_FLAGS = Flag.DATE | Flag.TIME


class Level(IntFlag):
    """Severity bits; any subset may be enabled."""
    NONE = 0
    DEBUG = 1 << 0
    INFO = 1 << 1
    WARNING = 1 << 2
    ERROR = 1 << 3
    FATAL = 1 << 4
    ALL = DEBUG | INFO | WARNING | ERROR | FATAL


PREFIX_EMPTY = ""

# Table-driven prefix lookup
PREFIXES = {
    Level.DEBUG: "DEBU ",
    Level.INFO: "INFO ",
    Level.WARNING: "WARN ",
    Level.ERROR: "ERRO ",
    Level.FATAL: "FATA ",
}
