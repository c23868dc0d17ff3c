import os
import re
import socket
import time
from unittest import mock

import pytest

from safecat.errors import FatalError
from safecat.naming import get_hostname, unique_name

NAME_RE = re.compile(r"^(\d+)\.M(\d{6})P(\d+)\.(.+)$")


def test_get_hostname_matches_socket():
    assert get_hostname() == socket.gethostname()


def test_get_hostname_failure_is_fatal():
    with mock.patch("socket.gethostname", side_effect=OSError(5, "boom")):
        with pytest.raises(FatalError) as info:
            get_hostname()
    assert info.value.exit_code == 111
    assert info.value.render().startswith("safecat: fatal: can't determine hostname: ")


def test_worked_example():
    name = unique_name(1_000_000_000_123_456_789, 42, "host")
    assert name == "1000000010.M123456P42.host"


def test_microseconds_are_zero_padded():
    name = unique_name(5_000_001_000, 7, "box")
    assert ".M000001P7." in name


def test_parts_round_trip():
    now = 1_700_000_123_987_654_321
    match = NAME_RE.match(unique_name(now, 1234, "mail.example.com"))
    assert match is not None
    sec, usec, pid, host = match.groups()
    assert int(sec) - 10 == now // 1_000_000_000
    assert int(usec) == (now % 1_000_000_000) // 1000
    assert int(pid) == 1234
    assert host == "mail.example.com"


def test_defaults_use_process_and_host():
    before = time.time_ns() // 1_000_000_000
    name = unique_name()
    after = time.time_ns() // 1_000_000_000
    match = NAME_RE.match(name)
    assert match is not None
    assert before + 10 <= int(match.group(1)) <= after + 10
    assert int(match.group(3)) == os.getpid()
    assert match.group(4) == socket.gethostname()


def test_later_time_gives_different_name():
    first = unique_name(2_000_000_000_000_000, 1, "h")
    second = unique_name(2_000_000_000_001_000, 1, "h")
    assert first < second


def test_negative_time_rejected():
    with pytest.raises(ValueError):
        unique_name(-1, 1, "h")


def test_negative_pid_rejected():
    with pytest.raises(ValueError):
        unique_name(0, -5, "h")