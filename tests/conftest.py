"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from headr.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin.

    Usage:
        result = invoke(["-n", "3", "file.txt"])
        result = invoke(["-c", "5"], input_data=b"hello world")

    stdout and stderr are captured separately (result.stdout, result.stderr).
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def make_file(tmp_path):
    """Write a file under tmp_path and return its path as a string.

    Text content is written as UTF-8; bytes are written as-is.
    """

    def _make_file(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return str(path)

    return _make_file


@pytest.fixture
def sample_text():
    """Twelve numbered lines, two past the default line count."""
    return "".join(f"line {i}\n" for i in range(1, 13))
