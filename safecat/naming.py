"""Unique file names built from the clock, the process id and the host name."""

from __future__ import annotations

import os
import socket
import time

from safecat.errors import FATAL_PREFIX, FatalError

# The clock is kept as a TAI label whose epoch sits 10 seconds before the
# Unix epoch, so the seconds part of a name is Unix time plus 10.
_TAI_OFFSET = 10


def get_hostname() -> str:
    """Return the local host name, or raise FatalError if it cannot be read."""
    try:
        return socket.gethostname()
    except OSError as exc:
        raise FatalError(FATAL_PREFIX + "can't determine hostname: ", 111, exc.errno) from exc


def unique_name(now: int | None = None, pid: int | None = None, hostname: str | None = None) -> str:
    """Return a name of the form ``<sec>.M<usec>P<pid>.<host>``.

    ``now`` is the time in nanoseconds since the Unix epoch; missing
    arguments are taken from the clock, the process and the host.
    """
    if now is None:
        now = time.time_ns()
    if now < 0:
        raise ValueError("time must not be before the epoch")
    if pid is None:
        pid = os.getpid()
    if pid < 0:
        raise ValueError("process id must not be negative")
    if hostname is None:
        hostname = get_hostname()

    seconds, remainder = divmod(now, 1_000_000_000)
    microseconds = remainder // 1000
    return f"{seconds + _TAI_OFFSET}.M{microseconds:06d}P{pid}.{hostname}"