"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime

import pytest

from decoder_suite import log
from decoder_suite.history import HistoryLedger
from decoder_suite.models import ConversionResult
from decoder_suite.registry import Scheme
from decoder_suite.session import ConversionSession


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep verbose diagnostics off unless a test turns them on."""
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture
def base_time():
    """Provide a consistent base time for tests."""
    return datetime(2026, 10, 18, 16, 29, 0)


@pytest.fixture
def ledger():
    return HistoryLedger()


@pytest.fixture
def session(ledger):
    return ConversionSession(ledger)


# ============================================================================
# Result Fixtures
# ============================================================================


@pytest.fixture
def make_result(base_time):
    """Factory for ConversionResult records with a fixed timestamp."""

    def _make(index: int = 0, scheme: Scheme = Scheme.MORSE, reverse: bool = False):
        return ConversionResult(
            input=f"input {index}",
            output=f"output {index}",
            scheme=scheme,
            reverse=reverse,
            timestamp=base_time,
        )

    return _make


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def multiline_text():
    """Three lines and a trailing newline."""
    return "sos\nhello world\nabc\n"


@pytest.fixture
def temp_text_file(tmp_path, multiline_text):
    """Create a temporary input file."""
    file_path = tmp_path / "notes.txt"
    file_path.write_text(multiline_text, encoding="utf-8")
    return file_path
