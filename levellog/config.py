"""Configuration management."""

import os

from .flags import Flag, Level, STD_FLAGS

FLAG_NAMES = {
    "none": Flag.NONE,
    "date": Flag.DATE,
    "time": Flag.TIME,
    "microseconds": Flag.MICROSECONDS,
    "longfile": Flag.LONGFILE,
    "shortfile": Flag.SHORTFILE,
    "utc": Flag.UTC,
    "std": STD_FLAGS,
}

LEVEL_NAMES = {
    "none": Level.NONE,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warning": Level.WARNING,
    "error": Level.ERROR,
    "fatal": Level.FATAL,
    "all": Level.ALL,
}


def _parse(value: str, names: dict, kind: str) -> int:
    mask = 0
    for token in value.split(","):
        token = token.strip().lower()
        if not token:
            continue
        if token not in names:
            raise ValueError(f"unknown {kind} {token!r}")
        mask |= names[token]
    return mask


def parse_flags(value: str) -> Flag:
    """Parse a comma list of flag names, e.g. "date,time,shortfile"."""
    return Flag(_parse(value, FLAG_NAMES, "flag"))


def parse_levels(value: str) -> Level:
    """Parse a comma list of severity names, e.g. "warning,error"."""
    return Level(_parse(value, LEVEL_NAMES, "level"))


# Default logger configuration
LEVELLOG_FLAGS = os.getenv("LEVELLOG_FLAGS", "std")
LEVELLOG_LEVELS = os.getenv("LEVELLOG_LEVELS", "all")
