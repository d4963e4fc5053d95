"""Test configuration utilities.

Provides helpers for overriding configuration in tests
without leaving changes in ``os.environ``.
"""

import os
from contextlib import contextmanager
from typing import Any, Generator

from textspritzer.config import reset_settings


@contextmanager
def override_settings(**kwargs: Any) -> Generator[None, None, None]:
    """Context manager to override settings for testing.

    Usage:
        with override_settings(SPRITZER_DEFAULT_WPM=250):
            assert get_settings().default_wpm == 250

    Args:
        **kwargs: Environment variable overrides, keyed by env var name.
    """
    original_env: dict[str, str | None] = {}

    for key, value in kwargs.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = str(value)

    reset_settings()

    try:
        yield
    finally:
        for key, original in original_env.items():
            if original is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = original
        reset_settings()
