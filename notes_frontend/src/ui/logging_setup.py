"""Logging configuration shared by the app modules."""

from __future__ import annotations

import logging

from src.ui.config import get_log_level

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


# PUBLIC_INTERFACE
def configure_logging() -> logging.Logger:
    """Configure root logging once and return the app logger."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
    return logging.getLogger("notes_ui")
