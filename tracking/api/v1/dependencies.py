from functools import lru_cache

from fastapi import Depends
from tracking.infrastructure.kafka.producer import KafkaAnalyticsRecorder
from tracking.services.dispatcher import EventDispatcher
from tracking.services.recorder import AnalyticsRecorder


@lru_cache
def get_analytics_recorder() -> AnalyticsRecorder:
    """Cached KafkaAnalyticsRecorder singleton."""
    return KafkaAnalyticsRecorder()


def get_event_dispatcher(
    recorder: AnalyticsRecorder = Depends(get_analytics_recorder),
) -> EventDispatcher:
    return EventDispatcher(recorder)
