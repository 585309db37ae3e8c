from confluent_kafka import KafkaException, Producer
from tracking.core.config import settings
from tracking.core.logger import get_logger
from tracking.schemas.product_event import ProductEvent
from tracking.schemas.tracking_request import EventKind
from tracking.services.recorder import AnalyticsRecorder

logger = get_logger("kafka.producer")


class KafkaAnalyticsRecorder(AnalyticsRecorder):
    """Publishes one ProductEvent per tracked interaction, keyed by product."""

    def __init__(self):
        self.producer = Producer(
            {
                "bootstrap.servers": settings.kafka_bootstrap_servers,
                "acks": "all",
                "linger.ms": 20,
                "client.id": settings.otel_service_name,
            }
        )
        self.topic = settings.kafka_topic_product_events

    async def track_product_view(self, product_id: str, actor_id: str | None) -> None:
        await self.send_event(
            ProductEvent(type=EventKind.VIEW, product_id=product_id, actor_id=actor_id)
        )

    async def track_bookmark(self, product_id: str, actor_id: str) -> None:
        await self.send_event(
            ProductEvent(
                type=EventKind.BOOKMARK, product_id=product_id, actor_id=actor_id
            )
        )

    async def track_cart_add(self, product_id: str, actor_id: str) -> None:
        await self.send_event(
            ProductEvent(
                type=EventKind.CART_ADD, product_id=product_id, actor_id=actor_id
            )
        )

    def _delivery_report(self, err, msg):
        if err:
            logger.error("kafka_delivery_failed", extra={"error": str(err)})
        else:
            logger.debug(
                "kafka_delivery_success",
                extra={
                    "topic": msg.topic(),
                    "partition": msg.partition(),
                    "offset": msg.offset(),
                },
            )

    async def send_event(self, event: ProductEvent):
        payload = event.model_dump_json().encode("utf-8")
        key = event.product_id.encode("utf-8")
        logger.debug(
            "Producing event",
            extra={
                "topic": self.topic,
                "event_type": event.type.value,
                "event_id": str(event.id),
            },
        )

        try:
            self.producer.produce(
                topic=self.topic,
                key=key,
                value=payload,
                callback=self._delivery_report,
            )
        except BufferError:
            logger.error(
                "Producer queue full",
                extra={"event_id": str(event.id), "queue_length": len(self.producer)},
            )
            raise
        except KafkaException as e:
            logger.error(
                "Kafka produce error",
                extra={
                    "event_id": str(event.id),
                    "error_code": e.args[0].code(),
                    "retriable": e.args[0].retriable(),
                },
            )
            raise

        # Serve delivery callbacks for earlier messages without blocking.
        self.producer.poll(0)

    def flush(self):
        """Flush outstanding messages"""
        remaining = self.producer.flush(timeout=5)
        if remaining > 0:
            logger.warning(
                "producer_flush_remaining", extra={"remaining_messages": remaining}
            )
