"""Shared utilities and components for the tracking service."""

from .config import BaseKafkaConfig, BaseLoggingConfig, BaseServiceConfig
from .constants import Environment, Topics

__all__ = [
    "Environment",
    "Topics",
    "BaseServiceConfig",
    "BaseLoggingConfig",
    "BaseKafkaConfig",
]
