import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from shared.metrics import get_counter, get_histogram
from tracking.api.v1.dependencies import get_event_dispatcher
from tracking.auth.dependencies import get_current_actor_optional
from tracking.core.errors import InternalError, TrackingError
from tracking.core.logger import get_logger
from tracking.schemas.tracking_request import TrackingRequest, TrackingResult
from tracking.services.dispatcher import EventDispatcher

TRACKING_REQUESTS = get_counter(
    "requests_total",
    "Track requests by outcome",
    service="tracking",
    labelnames=("outcome",),
)
TRACKING_LATENCY = get_histogram(
    "request_latency_seconds", "Track request latency", service="tracking"
)
RECORDER_ERRORS = get_counter(
    "recorder_errors_total", "Unexpected failures while tracking", service="tracking"
)

router = APIRouter(prefix="/analytics", tags=["analytics"])


def _error_response(error: TrackingError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code, content={"error": error.message}
    )


@router.post(
    "/track",
    response_model=TrackingResult,
    status_code=status.HTTP_200_OK,
    summary="Track a product interaction",
    response_description="Event tracked",
)
async def track_event(
    request: Request,
    actor_id: str | None = Depends(get_current_actor_optional),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
):
    logger = get_logger("api.track")
    start_time = time.time()

    try:
        body = await request.json()
        tracking_request = TrackingRequest.model_validate(body)
        logger.info(
            "Received tracking event",
            extra={
                "event_type": str(tracking_request.event),
                "product_id": tracking_request.product_id,
                "actor_id": actor_id,
            },
        )
        await dispatcher.dispatch(tracking_request, actor_id)

    except TrackingError as e:
        TRACKING_REQUESTS.labels(outcome="rejected").inc()
        logger.info(
            "Tracking event rejected",
            extra={"status_code": e.status_code, "reason": e.message},
        )
        return _error_response(e)

    except Exception as e:
        TRACKING_REQUESTS.labels(outcome="failed").inc()
        RECORDER_ERRORS.inc()
        logger.exception(
            "Analytics tracking error",
            extra={"error_type": type(e).__name__, "error": str(e)},
        )
        return _error_response(InternalError())

    finally:
        TRACKING_LATENCY.observe(time.time() - start_time)

    TRACKING_REQUESTS.labels(outcome="tracked").inc()
    logger.info(
        "Event tracked successfully",
        extra={"processing_time": time.time() - start_time},
    )
    return TrackingResult()
