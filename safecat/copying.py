"""Copying an input stream into an open file descriptor."""

from __future__ import annotations

import functools
import os
from typing import BinaryIO, Callable, Union

from safecat.errors import FATAL_PREFIX, FatalError

_CHUNK = 8192

Source = Union[int, BinaryIO]


def _reader(source: Source) -> Callable[[int], bytes]:
    if isinstance(source, int):
        return functools.partial(os.read, source)
    return source.read


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def copy_stream(source: Source, fd: int) -> int:
    """Copy everything from ``source`` to ``fd`` and return the byte count.

    ``source`` is a binary file object or a descriptor. Any read or write
    failure raises FatalError.
    """
    read = _reader(source)
    total = 0
    try:
        while True:
            chunk = read(_CHUNK)
            if not chunk:
                break
            _write_all(fd, chunk)
            total += len(chunk)
    except OSError as exc:
        raise FatalError(FATAL_PREFIX + "unable to copy standard input") from exc
    return total