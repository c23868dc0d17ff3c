"""Checks on the directories that a delivery writes into."""

from __future__ import annotations

import os
import stat

from safecat.errors import FATAL_PREFIX, FatalError


def check_directory(path: str | os.PathLike[str]) -> os.stat_result:
    """Make sure ``path`` is a directory whose owner may write to it.

    Returns the stat result; raises FatalError when the directory cannot
    be used.
    """
    try:
        info = os.stat(path)
    except OSError as exc:
        raise FatalError(FATAL_PREFIX + "could not stat directory: ", 111, exc.errno) from exc
    if not stat.S_ISDIR(info.st_mode):
        raise FatalError(FATAL_PREFIX + "not a directory")
    if not info.st_mode & stat.S_IWUSR:
        raise FatalError(FATAL_PREFIX + "directory not writable")
    return info