"""Named logger access for the tracking service.

Falls back to a plain text configuration the first time a logger is
requested before `shared.logging.json.configure_logging` ran (scripts,
tests, the interactive shell).
"""

from __future__ import annotations

import logging

_configured = False


def get_logger(name: str, auto_configure: bool = True) -> logging.Logger:
    """Get a named logger, configuring minimal logging on first use.

    Args:
        name: Logger name, dotted by component (``"api.track"``)
        auto_configure: Whether to fall back to basic logging when
            nothing configured the root logger yet

    Returns:
        Logger instance that propagates to the root handler
    """
    global _configured

    if auto_configure and not _configured:
        _configure_minimal_logging()
        _configured = True

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


def _configure_minimal_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def is_configured() -> bool:
    return _configured


def mark_configured():
    """Mark logging as configured (called by configure_logging)."""
    global _configured
    _configured = True
