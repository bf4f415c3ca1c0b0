"""Dead-letter queue models."""

from typing import Any

from pydantic import Field, field_validator

from .base import HeaderMap, QStashModel, QueryParams
from .events import decode_body


class DlqRequest(QueryParams):
    """Filters for ``GET /v2/dlq``."""

    cursor: str | None = Field(default=None)
    message_id: str | None = Field(default=None)
    url: str | None = Field(default=None)
    topic_name: str | None = Field(default=None)
    schedule_id: str | None = Field(default=None)
    queue_name: str | None = Field(default=None)
    response_status: int | None = Field(default=None)
    caller_ip: str | None = Field(default=None)
    from_date: int | None = Field(default=None)
    to_date: int | None = Field(default=None)
    count: int | None = Field(default=None, ge=1)
    order: str | None = Field(default=None)


class DlqMessage(QStashModel):
    """A message that exhausted its delivery retries."""

    dlq_id: str
    message_id: str
    topic_name: str | None = Field(default=None)
    url: str | None = Field(default=None)
    method: str | None = Field(default=None)
    header: HeaderMap = Field(default_factory=dict)
    body: str | None = Field(default=None)
    created_at: int = Field(default=0)

    max_retries: int | None = Field(default=None)
    not_before: int | None = Field(default=None)
    callback: str | None = Field(default=None)
    failure_callback: str | None = Field(default=None)
    schedule_id: str | None = Field(default=None)
    queue_name: str | None = Field(default=None)
    caller_ip: str | None = Field(default=None, alias="callerIP")

    # Last response received from the destination
    response_status: int | None = Field(default=None)
    response_header: HeaderMap | None = Field(default=None)
    response_body: str | None = Field(default=None)
    response_body_base64: bytes | None = Field(default=None)

    @field_validator("response_body_base64", mode="before")
    @classmethod
    def _decode_response_body(cls, value: Any) -> Any:
        return decode_body(value)


class DlqListResponse(QStashModel):
    cursor: str | None = Field(default=None)
    messages: list[DlqMessage] = Field(default_factory=list)


class DeleteDlqResponse(QStashModel):
    deleted: int
