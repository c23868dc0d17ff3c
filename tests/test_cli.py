import errno
import io
import os
import re
import sys

import pytest

from safecat.cli import deliver, main
from safecat.errors import FatalError

NAME_PATTERN = re.compile(r"^\d+\.M\d{6}P\d+\..+$")


class _BrokenSource:
    def read(self, size):
        raise OSError("read failed")


@pytest.fixture
def dirs(tmp_path):
    tempdir = tmp_path / "tmp"
    destdir = tmp_path / "new"
    tempdir.mkdir()
    destdir.mkdir()
    return str(tempdir), str(destdir)


def test_deliver_writes_file_into_destination(dirs):
    tempdir, destdir = dirs
    pauses = []
    name = deliver(tempdir, destdir, io.BytesIO(b"message body\n"), pauses.append)
    assert NAME_PATTERN.match(name)
    assert os.listdir(destdir) == [name]
    with open(os.path.join(destdir, name), "rb") as handle:
        assert handle.read() == b"message body\n"
    assert os.listdir(tempdir) == []
    assert pauses == []


def test_deliver_name_holds_process_id(dirs):
    tempdir, destdir = dirs
    name = deliver(tempdir, destdir, io.BytesIO(b""), lambda seconds: None)
    assert f"P{os.getpid()}." in name
    assert os.path.getsize(os.path.join(destdir, name)) == 0


def test_deliver_file_mode(dirs):
    tempdir, destdir = dirs
    old_mask = os.umask(0)
    try:
        name = deliver(tempdir, destdir, io.BytesIO(b"x"), lambda seconds: None)
    finally:
        os.umask(old_mask)
    assert os.stat(os.path.join(destdir, name)).st_mode & 0o777 == 0o644


def test_deliver_missing_destination(tmp_path):
    tempdir = tmp_path / "tmp"
    tempdir.mkdir()
    with pytest.raises(FatalError) as caught:
        deliver(str(tempdir), str(tmp_path / "absent"), io.BytesIO(b"x"), lambda s: None)
    assert caught.value.errno_value == errno.ENOENT
    assert caught.value.render().startswith("safecat: fatal: could not stat directory: ")


def test_deliver_copy_failure_leaves_nothing(dirs):
    tempdir, destdir = dirs
    with pytest.raises(FatalError) as caught:
        deliver(tempdir, destdir, _BrokenSource(), lambda s: None)
    assert caught.value.render() == "safecat: fatal: unable to copy standard input"
    assert os.listdir(tempdir) == []
    assert os.listdir(destdir) == []


def test_main_usage_error(capsys):
    status = main(["only-one"])
    captured = capsys.readouterr()
    assert status == 100
    assert captured.err == "safecat: usage: safecat <tempdir> <destdir>\n"
    assert captured.out == ""


def test_main_too_many_arguments(capsys):
    assert main(["a", "b", "c"]) == 100
    assert "usage" in capsys.readouterr().err


def test_main_delivers_stdin(dirs, monkeypatch, capsys):
    tempdir, destdir = dirs
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"from stdin")))
    status = main([tempdir, destdir])
    printed = capsys.readouterr().out
    assert status == 0
    name = printed.rstrip("\n")
    assert printed.endswith("\n")
    assert os.listdir(destdir) == [name]
    with open(os.path.join(destdir, name), "rb") as handle:
        assert handle.read() == b"from stdin"


def test_main_reports_fatal_error(tmp_path, monkeypatch, capsys):
    plain = tmp_path / "plain"
    plain.write_bytes(b"")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"x")))
    status = main([str(plain), str(tmp_path)])
    captured = capsys.readouterr()
    assert status == 111
    assert captured.err == "safecat: fatal: not a directory\n"
    assert captured.out == ""