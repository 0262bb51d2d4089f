"""Shared fixtures."""

import pytest

from keyboard_notifications.registry import shutdown_registry


@pytest.fixture(autouse=True)
def reset_process_registry():
    """Make sure no test leaks the process-wide registry into the next."""
    shutdown_registry()
    yield
    shutdown_registry()
