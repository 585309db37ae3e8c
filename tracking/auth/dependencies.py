"""FastAPI dependencies exposing the current actor to route handlers."""

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from .service import authenticate_user


class OptionalHTTPBasic(HTTPBasic):
    """HTTP Basic scheme that never rejects a request.

    Missing, non-Basic and undecodable credentials all resolve to None so the
    track endpoint stays the only place that reports errors to the caller.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> HTTPBasicCredentials | None:
        try:
            return await super().__call__(request)
        except HTTPException:
            return None


security = OptionalHTTPBasic()


def get_current_actor_optional(
    credentials: HTTPBasicCredentials | None = Depends(security),
) -> str | None:
    """Resolve the caller's actor id, or None for anonymous callers."""
    if credentials is None:
        return None
    return authenticate_user(credentials.username, credentials.password)
