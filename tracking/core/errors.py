"""Errors reported by the track endpoint.

Each carries the HTTP status and the message that is safe to show to the
caller. Anything that is not a TrackingError is reported as InternalError.
"""

from fastapi import status


class TrackingError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Failed to track event"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequest(TrackingError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Product ID is required"


class Unauthenticated(TrackingError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class InvalidEventKind(TrackingError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid event type"


class InternalError(TrackingError):
    pass


__all__ = [
    "TrackingError",
    "InvalidRequest",
    "Unauthenticated",
    "InvalidEventKind",
    "InternalError",
]
