"""Deliver standard input into a directory using the maildir algorithm."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
import threading
import time
from typing import Callable, Iterator, Sequence

from safecat.copying import Source, copy_stream
from safecat.dirs import check_directory
from safecat.errors import FATAL_PREFIX, USAGE_PREFIX, FatalError
from safecat.naming import unique_name

_ATTEMPTS = 5
_RETRY_DELAY = 2
_TIMEOUT = 86400


@contextlib.contextmanager
def _deadline(seconds: int) -> Iterator[None]:
    """Raise FatalError in the main thread if the block outlives ``seconds``."""
    if not hasattr(signal, "SIGALRM") or threading.current_thread() is not threading.main_thread():
        yield
        return

    def _expired(signum, frame):
        raise FatalError(FATAL_PREFIX + "Timer has expired; giving up")

    previous = signal.signal(signal.SIGALRM, _expired)
    signal.alarm(seconds)
    try:
        yield
    finally:
        signal.alarm(0)
        signal.signal(signal.SIGALRM, previous)


def _discard(path: str) -> None:
    with contextlib.suppress(OSError):
        os.unlink(path)


def _pick_name(tempdir: str, sleep: Callable[[float], object]) -> str:
    for attempt in range(1, _ATTEMPTS + 1):
        name = unique_name()
        try:
            os.stat(os.path.join(tempdir, name))
        except FileNotFoundError:
            return name
        except OSError:
            pass
        if attempt == _ATTEMPTS:
            break
        sleep(_RETRY_DELAY)
    raise FatalError(FATAL_PREFIX + "could not stat temporary file")


def _write_and_link(fd: int, source: Source, tmppath: str, dstpath: str) -> None:
    try:
        copy_stream(source, fd)
    except BaseException:
        with contextlib.suppress(OSError):
            os.close(fd)
        raise
    try:
        os.fsync(fd)
    except OSError as exc:
        with contextlib.suppress(OSError):
            os.close(fd)
        raise FatalError(FATAL_PREFIX + "can't fsync/close output file: ", 111, exc.errno) from exc
    try:
        os.close(fd)
    except OSError as exc:
        raise FatalError(FATAL_PREFIX + "can't fsync/close output file: ", 111, exc.errno) from exc
    try:
        os.link(tmppath, dstpath)
    except OSError as exc:
        raise FatalError(FATAL_PREFIX + "can't link output file: ", 111, exc.errno) from exc


def deliver(
    tempdir: str,
    destdir: str,
    source: Source,
    sleep: Callable[[float], object] = time.sleep,
) -> str:
    """Write ``source`` to a new file in ``destdir`` by way of ``tempdir``.

    Returns the name of the delivered file. Raises FatalError on failure,
    leaving no temporary file behind.
    """
    check_directory(tempdir)
    check_directory(destdir)

    name = _pick_name(tempdir, sleep)
    tmppath = os.path.join(tempdir, name)
    dstpath = os.path.join(destdir, name)

    with _deadline(_TIMEOUT):
        flags = os.O_WRONLY | os.O_EXCL | os.O_CREAT | getattr(os, "O_LARGEFILE", 0)
        try:
            fd = os.open(tmppath, flags, 0o644)
        except OSError as exc:
            raise FatalError(FATAL_PREFIX + "couldn't create output file: ", 111, exc.errno) from exc
        try:
            _write_and_link(fd, source, tmppath, dstpath)
        except BaseException:
            _discard(tmppath)
            raise
        _discard(tmppath)
    return name


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(USAGE_PREFIX + "safecat <tempdir> <destdir>\n")
        sys.stderr.flush()
        return 100
    tempdir, destdir = args
    try:
        name = deliver(tempdir, destdir, sys.stdin.buffer)
    except FatalError as exc:
        sys.stderr.write(exc.render() + "\n")
        sys.stderr.flush()
        return exc.exit_code
    sys.stdout.write(name + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())