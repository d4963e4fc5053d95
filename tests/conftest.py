"""
Pytest configuration and fixtures for all tests
"""

import pytest

from textspritzer.config import reset_settings


@pytest.fixture(autouse=True)
def reset_config():
    """Reset config singleton before each test to ensure clean state."""
    reset_settings()
    yield
    reset_settings()
