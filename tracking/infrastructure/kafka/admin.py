from confluent_kafka import KafkaError
from confluent_kafka.admin import AdminClient, NewTopic
from tracking.core.config import settings
from tracking.core.logger import get_logger

logger = get_logger("kafka.admin")


def create_topics():
    """Create the product events topic, ignoring topics that already exist."""
    topic_names = [settings.kafka_topic_product_events]
    logger.info("Creating Kafka topics", extra={"topics": topic_names})
    admin = AdminClient({"bootstrap.servers": settings.kafka_bootstrap_servers})

    topics = [
        NewTopic(
            topic,
            num_partitions=settings.kafka_topic_partitions,
            replication_factor=1,
        )
        for topic in topic_names
    ]

    result = admin.create_topics(topics, validate_only=False)

    for topic, future in result.items():
        try:
            future.result()
            logger.info("Topic created", extra={"topic": topic})
        except Exception as e:
            if e.args[0].code() != KafkaError.TOPIC_ALREADY_EXISTS:
                logger.error(
                    "Failed to create topic", extra={"topic": topic, "error": e}
                )
