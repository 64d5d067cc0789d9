"""Tests for opening sources."""

import io

import pytest

from headr.models.errors import OpenError, ReadError
from headr.sources import FileStream, StdinStream, open_source


class FailingReader(io.RawIOBase):
    """Readable stream whose reads always fail."""

    def readable(self):
        return True

    def readinto(self, b):
        raise OSError(5, "Input/output error")


def test_dash_is_stdin():
    stdin = io.BytesIO(b"a\nb\n")
    stream = open_source("-", stdin=stdin)

    assert isinstance(stream, StdinStream)
    assert stream.name == "-"
    assert stream.readline() == b"a\n"


def test_closing_stdin_stream_leaves_stdin_open():
    stdin = io.BytesIO(b"a\n")
    with open_source("-", stdin=stdin) as stream:
        stream.readline()

    assert stream.closed
    assert not stdin.closed


def test_file_source(make_file):
    path = make_file("a.txt", "one\ntwo\n")
    with open_source(path) as stream:
        assert isinstance(stream, FileStream)
        assert stream.readline() == b"one\n"
        assert stream.read(100) == b"two\n"
        assert stream.read(100) == b""
        raw = stream.raw

    assert raw.closed


def test_missing_file_raises_open_error(tmp_path):
    missing = str(tmp_path / "missing.txt")
    with pytest.raises(OpenError) as excinfo:
        open_source(missing)

    assert excinfo.value.source == missing
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert str(excinfo.value) == f"{missing}: No such file or directory"


def test_read_failure_raises_read_error():
    stream = open_source("-", stdin=io.BufferedReader(FailingReader()))
    with pytest.raises(ReadError) as excinfo:
        stream.readline()

    assert excinfo.value.source == "-"
    assert str(excinfo.value) == "-: Input/output error"
