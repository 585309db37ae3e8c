from shared.logging.json import configure_logging
from tracking.core.config import settings
from tracking.core.logger import get_logger
from tracking.core.tracing import configure_tracing
from tracking.infrastructure.kafka.admin import create_topics

logger = get_logger("startup")


def initialize_application():
    """Configure logging, then tracing and Kafka topics when enabled."""
    logger.info("initializing_application")
    configure_logging(
        service=settings.otel_service_name,
        level=settings.app_log_level,
        environment=settings.app_environment,
        redaction_patterns=settings.app_log_redaction_patterns,
    )
    if settings.tracing_enabled:
        configure_tracing()
    if settings.kafka_create_topics:
        create_topics()
    logger.info(
        "application_initialized",
        extra={
            "kafka_topic": settings.kafka_topic_product_events,
            "otel_service": settings.otel_service_name,
            "tracing_enabled": settings.tracing_enabled,
        },
    )
