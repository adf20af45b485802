"""Pytest configuration and fixtures."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from namedexport.cst.diagnostics import Diagnostics

FIXTURES = Path(__file__).parent / "fixtures" / "exports"


@pytest.fixture
def fixture_source() -> Callable[[str], str]:
    """Returns a loader for files under tests/fixtures/exports."""

    def _load(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def diagnostics() -> Callable[[str], Diagnostics]:
    """Factory fixture for a fresh diagnostics collector per file path."""

    def _make(filepath: str = "module.js") -> Diagnostics:
        return Diagnostics(filepath)

    return _make


@pytest.fixture(autouse=True)
def clean_root_logger():
    """Remove all handlers from root logger after test.

    cli.setup_logging() modifies global state (root logger). This fixture
    ensures tests don't leak handlers between test runs.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
