"""Test configuration and fixtures for jsonreflow."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def read_fixture():
    """Return a function that reads a fixture document as text."""

    def read(name):
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return read
