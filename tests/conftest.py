"""
Pytest configuration and shared fixtures for errchain tests.
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from errchain.config import ConfigRegistry  # noqa: E402
from errchain.telemetry.logging import reset_loggers  # noqa: E402


# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Reset configuration and logger caches around each test."""
    ConfigRegistry.reset()
    reset_loggers()
    yield
    ConfigRegistry.reset()
    reset_loggers()


# =============================================================================
# Error Fixtures
# =============================================================================


class ForeignError(Exception):
    """Exception not produced by errchain."""


@pytest.fixture
def foreign_error() -> ForeignError:
    """Return an exception from outside the library."""
    return ForeignError("foreign failure")


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
