"""Shared configuration base classes.

Logging and Kafka settings common to every service entry point.
"""

from pydantic_settings import BaseSettings


class BaseLoggingConfig(BaseSettings):
    """Common logging configuration."""

    app_log_level: str = "INFO"
    app_log_redaction_patterns: list[str] = [
        "password",
        "token",
        "secret",
        "authorization",
        "cookie",
        "credentials",
    ]
    app_environment: str = "production"


class BaseKafkaConfig(BaseSettings):
    """Common Kafka configuration."""

    kafka_bootstrap_servers: str = "kafka1:19092"


class BaseServiceConfig(BaseLoggingConfig, BaseKafkaConfig):
    """Base configuration combining logging and Kafka settings.

    The otel_service_name should be overridden by each service.
    """

    otel_service_name: str = "unknown"


__all__ = ["BaseLoggingConfig", "BaseKafkaConfig", "BaseServiceConfig"]
