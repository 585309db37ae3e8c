"""Analytics recorder interface.

The track endpoint only ever talks to this interface; the Kafka publisher in
`tracking.infrastructure.kafka.producer` is the production implementation
and tests substitute mocks through FastAPI dependency overrides.
"""

from abc import ABC, abstractmethod

__all__ = ["AnalyticsRecorder"]


class AnalyticsRecorder(ABC):
    """Records product interactions for downstream analytics."""

    @abstractmethod
    async def track_product_view(
        self, product_id: str, actor_id: str | None
    ) -> None:  # pragma: no cover
        """Record a product view; anonymous views carry ``actor_id=None``."""
        raise NotImplementedError

    @abstractmethod
    async def track_bookmark(
        self, product_id: str, actor_id: str
    ) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    async def track_cart_add(
        self, product_id: str, actor_id: str
    ) -> None:  # pragma: no cover
        raise NotImplementedError

    def flush(self) -> None:
        """Drain anything buffered before shutdown. No-op by default."""
