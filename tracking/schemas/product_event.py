import time
from uuid import UUID

from pydantic import BaseModel, Field
from tracking.schemas.tracking_request import EventKind
from uuid6 import uuid7


class ProductEvent(BaseModel):
    """Record published for every tracked product interaction."""

    id: UUID = Field(default_factory=uuid7, description="UUID v7 (time-based)")
    type: EventKind = Field(..., description="Interaction kind")
    product_id: str = Field(..., description="The product identifier")
    actor_id: str | None = Field(
        None, description="Authenticated caller, absent for anonymous views"
    )
    timestamp: int = Field(
        default_factory=lambda: int(time.time() * 1000),
        description="Epoch-ms when the event was recorded",
    )
