"""Logging setup for host applications embedding the pacer."""

import logging
from typing import Optional

from textspritzer.config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging at ``level`` or the configured ``log_level``."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
