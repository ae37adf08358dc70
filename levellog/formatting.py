"""Message construction and header rendering."""

import os
from collections.abc import Mapping
from datetime import datetime, timezone

from .flags import Flag

BAD_FORMAT = "%!(BADFORMAT"


def encode(s: str) -> bytes:
    """UTF-8 encode s, keeping undecodable bytes and escaping lone surrogates."""
    try:
        return s.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return s.encode("utf-8", "backslashreplace")


def sprint(*args) -> str:
    """Concatenate args with no separators."""
    return "".join(str(a) for a in args)


def sprintf(template: str, *args) -> str:
    """Printf-style substitution of args into template.

    A single non-empty mapping argument feeds %(name)s directives. A
    template that does not match its arguments is returned with the
    arguments appended after a %!(BADFORMAT marker instead of raising.
    """
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return template % args
    except (TypeError, ValueError, KeyError):
        return f"{template} {BAD_FORMAT} {args!r})"


def sprintln(*args) -> str:
    """Join args with single spaces and append a newline."""
    return " ".join(str(a) for a in args) + "\n"


def itoa(buf: bytearray, i: int, wid: int) -> None:
    """Append i as decimal ASCII, zero-padded to wid digits.

    A width below 2 disables padding. Negative values render as "0".
    """
    if i < 0:
        i = 0
    if wid > 1:
        buf += b"%0*d" % (wid, i)
    else:
        buf += b"%d" % i


def short_file(path: str) -> str:
    """Return the final path element, or path itself if it has no separator."""
    idx = path.rfind("/")
    if os.sep != "/":
        idx = max(idx, path.rfind(os.sep))
    if idx > 0:
        return path[idx + 1:]
    return path


def format_header(
    buf: bytearray,
    flags: int,
    prefix: str,
    now: datetime,
    file: str,
    line: int
) -> None:
    """Append prefix, then date, time and file:line as selected by flags.

    now must be timezone-aware; it is rendered in the local zone unless
    Flag.UTC is set.
    """
    buf += encode(prefix)
    if flags & (Flag.DATE | Flag.TIME | Flag.MICROSECONDS):
        now = now.astimezone(timezone.utc if flags & Flag.UTC else None)
        if flags & Flag.DATE:
            itoa(buf, now.year, 4)
            buf += b"/"
            itoa(buf, now.month, 2)
            buf += b"/"
            itoa(buf, now.day, 2)
            buf += b" "
        if flags & (Flag.TIME | Flag.MICROSECONDS):
            itoa(buf, now.hour, 2)
            buf += b":"
            itoa(buf, now.minute, 2)
            buf += b":"
            itoa(buf, now.second, 2)
            if flags & Flag.MICROSECONDS:
                buf += b"."
                itoa(buf, now.microsecond, 6)
            buf += b" "
    if flags & (Flag.SHORTFILE | Flag.LONGFILE):
        if flags & Flag.SHORTFILE:
            file = short_file(file)
        buf += encode(file)
        buf += b":"
        itoa(buf, line, -1)
        buf += b": "
