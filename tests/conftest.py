"""Pytest configuration and shared fixtures."""

import pytest
import structlog


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: integration tests (in-memory MCP client/server)")


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo configure_logging between tests so no test logs to another test's captured stream."""
    yield
    structlog.reset_defaults()
