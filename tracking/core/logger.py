import logging

from shared.logging.logger import get_logger as shared_get_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the tracking service."""
    return shared_get_logger(f"tracking.{name}")
