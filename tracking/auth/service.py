"""Actor identity resolution.

Checks HTTP Basic credentials against the configured user table. A caller
that fails the check is not rejected here: the track endpoint accepts
anonymous views and reports 401 itself for events that need an actor.
"""

import secrets

from tracking.core.config import settings
from tracking.core.logger import get_logger

logger = get_logger("auth")


def authenticate_user(username: str, password: str) -> str | None:
    """Return the actor id for valid credentials, otherwise None.

    Args:
        username (str): The username provided by the client.
        password (str): The password provided by the client.
    """
    stored_password = settings.auth_users.get(username)

    if stored_password is None:
        logger.warning("Unknown user", extra={"username": username})
        return None

    if not secrets.compare_digest(
        stored_password.encode("utf-8"), password.encode("utf-8")
    ):
        logger.warning("Invalid password", extra={"username": username})
        return None

    return username
