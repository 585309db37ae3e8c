from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventKind(str, Enum):
    """Client-side product interactions accepted by the track endpoint."""

    COMPARISON_ADD = "comparison_add"
    BOOKMARK = "bookmark"
    CART_ADD = "cart_add"
    VIEW = "view"

    @classmethod
    def from_value(cls, value: Any) -> "EventKind | None":
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def requires_actor(self) -> bool:
        return self in (EventKind.BOOKMARK, EventKind.CART_ADD)


class TrackingRequest(BaseModel):
    """Inbound body of POST /analytics/track.

    Both fields are optional at the schema level so that a missing product id
    or an unknown event kind is reported with the endpoint's own messages
    rather than a 422.
    """

    event: Any = Field(None, description="One of the EventKind values")
    product_id: str | None = Field(
        None, alias="productId", description="Opaque product identifier"
    )

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator("product_id", mode="before")
    @classmethod
    def falsy_product_id_is_missing(cls, value: Any) -> Any:
        # 0 and false count as missing, like "" and null
        if isinstance(value, (bool, int, float)) and not value:
            return None
        return value


class TrackingResult(BaseModel):
    success: bool = True
