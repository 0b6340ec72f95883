"""Integration tests for the command-line interface.

These tests run jsonreflow as a subprocess and cover:
- Formatting stdin to stdout with default and explicit settings
- Configuration files and flag precedence
- Help and version output
- Exit codes for usage errors and invalid settings
"""

import subprocess
import sys

import pytest

# Skip all tests in this module unless --run-cli-tests is given
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, stdin=b""):
    """Run jsonreflow with the given arguments and standard input."""
    return subprocess.run(
        [sys.executable, "-m", "jsonreflow.cli.main", *args],
        input=stdin,
        capture_output=True,
        timeout=30,
    )


def test_formats_stdin():
    result = run_cli(stdin=b'{"one" "two" "three" {"four" "five"}}')

    assert result.returncode == 0
    assert result.stdout == b'{"one": "two", "three": {"four": "five"}}\n'
    assert result.stderr == b""


def test_formats_fixture(read_fixture):
    """Test the default layout of a commented document."""
    result = run_cli(stdin=read_fixture("in_long_comments.jsonc").encode("utf-8"))

    assert result.returncode == 0
    assert result.stdout.decode("utf-8") == read_fixture("out_long_default.json")


def test_compact_output():
    result = run_cli("-i", "", "-s", stdin=b'{"a": [1, 2], /* note */ "b": null}\n')

    assert result.returncode == 0
    assert result.stdout == b'{"a":[1,2],"b":null}'


def test_always_multi_line_with_trailing_commas():
    result = run_cli("-w", "0", "-t", stdin=b"[1 2]")

    assert result.returncode == 0
    assert result.stdout == b"[\n  1,\n  2,\n]\n"


def test_config_file_and_flag_precedence(tmp_path):
    config = tmp_path / "jsonreflow.json"
    config.write_text('{"indent": "\\t" "width": 0 // always expand\n}')

    result = run_cli("-c", str(config), "-w", "80", stdin=b"[1 2]")

    assert result.returncode == 0
    assert result.stdout == b"[1, 2]\n"

    result = run_cli("-c", str(config), stdin=b"[1 2]")

    assert result.returncode == 0
    assert result.stdout == b"[\n\t1,\n\t2\n]\n"


def test_help():
    result = run_cli("help")

    assert result.returncode == 0
    assert b"usage: jsonreflow" in result.stderr
    assert result.stdout == b""


def test_version():
    result = run_cli("--version")

    assert result.returncode == 0
    assert result.stdout.startswith(b"jsonreflow ")


@pytest.mark.parametrize(
    "args",
    [("extra",), ("--width", "narrow"), ("--unknown",)],
)
def test_usage_errors_exit_with_status_1(args):
    result = run_cli(*args)

    assert result.returncode == 1
    assert b"usage: jsonreflow" in result.stderr


def test_invalid_config_file(tmp_path):
    config = tmp_path / "jsonreflow.json"
    config.write_text('{"width": -4}')

    result = run_cli("-c", str(config), stdin=b"[]")

    assert result.returncode == 1
    assert result.stderr.startswith(b"Error: ")
    assert result.stdout == b""


def test_verbose_logging():
    result = run_cli("-v", stdin=b"[1]")

    assert result.returncode == 0
    assert b"DEBUG" in result.stderr
