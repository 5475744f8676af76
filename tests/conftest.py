"""Shared fixtures for the factorial-hash test suite."""

import logging

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo configure_logging(): drop its stderr handler and reset levels."""
    root = logging.getLogger()
    package = logging.getLogger("src")
    root_level = root.level
    package_level = package.level

    yield

    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(root_level)
    package.setLevel(package_level)
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FACTORIAL_HASH_UPPER_BOUND",
        "FACTORIAL_HASH_INCLUDE_FACTORIAL",
        "FACTORIAL_HASH_JSON_OUTPUT",
        "FACTORIAL_HASH_VERBOSE",
        "FACTORIAL_HASH_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
