# backend/logging_setup.py
"""Console logging for the app.  Safe to call on every Streamlit rerun."""

from __future__ import annotations

import logging

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "medreport-console"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach one console handler to the root logger.

    Streamlit re-executes page scripts on every interaction, so repeated
    calls only adjust the level and never stack handlers.

    Raises ValueError for an unknown level name.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if not any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        root_logger.addHandler(handler)
