from shared.config import BaseServiceConfig
from shared.constants import Topics


class Settings(BaseServiceConfig):
    otel_service_name: str = "tracking"

    # Kafka
    kafka_topic_product_events: str = Topics.PRODUCT_EVENTS
    kafka_topic_partitions: int = 3
    kafka_create_topics: bool = True

    # Tracing
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://jaeger:4317"

    # Actor identities accepted over HTTP Basic (username -> password)
    auth_users: dict[str, str] = {}


settings = Settings()
