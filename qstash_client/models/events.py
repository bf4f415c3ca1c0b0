"""Event log models."""

import base64
from enum import Enum
from typing import Any

from pydantic import Field, field_serializer, field_validator

from .base import HeaderMap, QStashModel, QueryParams


class EventState(str, Enum):
    """Delivery state of a message at the time of an event."""

    NONE = "NONE"

    # Accepted and stored by QStash
    CREATED = "CREATED"

    # Being processed by a worker
    ACTIVE = "ACTIVE"

    RETRY = "RETRY"
    ERROR = "ERROR"
    DELIVERED = "DELIVERED"

    # Errored too many times or hit an unrecoverable error
    FAILED = "FAILED"

    CANCEL_REQUESTED = "CANCEL_REQUESTED"
    CANCELLED = "CANCELLED"


def decode_body(value: Any) -> Any:
    """Decode a base64 body string; bytes pass through."""
    if isinstance(value, str):
        return base64.b64decode(value, validate=True)
    return value


class EventsRequest(QueryParams):
    """Filters for ``GET /v2/events``. Only set fields are sent."""

    # Pagination cursor from a previous response
    cursor: str | None = Field(default=None)

    message_id: str | None = Field(default=None)
    state: EventState | str | None = Field(default=None)
    url: str | None = Field(default=None)
    topic_name: str | None = Field(default=None)
    schedule_id: str | None = Field(default=None)
    queue_name: str | None = Field(default=None)

    # Inclusive bounds, Unix milliseconds
    from_date: int | None = Field(default=None)
    to_date: int | None = Field(default=None)

    # Default and max is 1000
    count: int | None = Field(default=None, ge=1, le=1000)

    # "earliestFirst" or "latestFirst"
    order: str | None = Field(default=None)


class Event(QStashModel):
    """One entry in the event log."""

    time: int = Field(default=0)
    message_id: str = Field(default="")
    header: HeaderMap = Field(default_factory=dict)
    body: bytes = Field(default=b"")
    state: EventState = Field(default=EventState.NONE)

    error: str | None = Field(default=None)
    next_delivery_time: int | None = Field(default=None)
    url: str | None = Field(default=None)
    topic_name: str | None = Field(default=None)
    endpoint_name: str | None = Field(default=None)
    schedule_id: str | None = Field(default=None)
    queue_name: str | None = Field(default=None)

    @field_validator("body", mode="before")
    @classmethod
    def _decode_body(cls, value: Any) -> Any:
        if value is None:
            return b""
        return decode_body(value)

    @field_validator("state", mode="before")
    @classmethod
    def _known_state(cls, value: Any) -> Any:
        try:
            return EventState(value)
        except ValueError:
            return EventState.NONE

    @field_serializer("body")
    def _encode_body(self, body: bytes) -> str:
        return base64.b64encode(body).decode()


class EventsResponse(QStashModel):
    # Absent once the last page has been returned
    cursor: str | None = Field(default=None)
    events: list[Event] = Field(default_factory=list)
