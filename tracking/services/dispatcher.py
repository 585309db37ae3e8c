from tracking.core.errors import InvalidEventKind, InvalidRequest, Unauthenticated
from tracking.core.logger import get_logger
from tracking.schemas.tracking_request import EventKind, TrackingRequest
from tracking.services.recorder import AnalyticsRecorder

logger = get_logger("dispatcher")


class EventDispatcher:
    """Validates a tracking request and hands it to the recorder.

    Checks run in a fixed order: product id, then event kind, then actor.
    Every failure raises before the recorder is touched, and at most one
    recorder operation runs per request.
    """

    def __init__(self, recorder: AnalyticsRecorder):
        self.recorder = recorder

    async def dispatch(self, request: TrackingRequest, actor_id: str | None) -> None:
        product_id = request.product_id
        if not product_id:
            raise InvalidRequest()

        kind = EventKind.from_value(request.event)
        if kind is None:
            raise InvalidEventKind()

        if kind.requires_actor and actor_id is None:
            raise Unauthenticated()

        if kind is EventKind.COMPARISON_ADD:
            # Accepted without recording; the recorder has no comparison operation.
            logger.debug("comparison_add_skipped", extra={"product_id": product_id})
        elif kind is EventKind.BOOKMARK:
            await self.recorder.track_bookmark(product_id, actor_id)
        elif kind is EventKind.CART_ADD:
            await self.recorder.track_cart_add(product_id, actor_id)
        elif kind is EventKind.VIEW:
            await self.recorder.track_product_view(product_id, actor_id)
