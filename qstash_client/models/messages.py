"""Message publishing models."""

from pydantic import BaseModel, Field

from .base import HeaderMap, QStashModel

FORWARD_PREFIX = "Upstash-Forward-"


def _duration(value: int | str) -> str:
    """Render a duration header value; bare integers are seconds."""
    if isinstance(value, int):
        return f"{value}s"
    return value


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set a header, replacing any existing spelling of the same name."""
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]
    headers[name] = value


class PublishOptions(BaseModel):
    """Delivery options for a published message, sent as ``Upstash-*`` headers."""

    content_type: str | None = Field(default=None)

    # HTTP method QStash uses when calling the destination
    method: str | None = Field(default=None)

    # Delivery timing
    delay: int | str | None = Field(default=None)
    not_before: int | None = Field(default=None)

    retries: int | None = Field(default=None, ge=0)
    timeout: int | str | None = Field(default=None)

    callback: str | None = Field(default=None)
    failure_callback: str | None = Field(default=None)

    deduplication_id: str | None = Field(default=None)
    content_based_deduplication: bool = Field(default=False)

    def to_headers(self, headers: dict[str, str] | None = None) -> dict[str, str]:
        """
        Build the request headers for a publish call.

        Args:
            headers: Headers to forward to the destination. Names that are
                neither ``Upstash-*`` nor ``Content-Type`` are prefixed with
                ``Upstash-Forward-``.

        Returns:
            Header dict ready to send to QStash
        """
        result: dict[str, str] = {}

        for name, value in (headers or {}).items():
            lower = name.lower()
            if lower.startswith("upstash-") or lower == "content-type":
                result[name] = value
            else:
                result[f"{FORWARD_PREFIX}{name}"] = value

        if self.content_type:
            set_header(result, "Content-Type", self.content_type)
        if self.method:
            set_header(result, "Upstash-Method", self.method.upper())
        if self.delay is not None:
            set_header(result, "Upstash-Delay", _duration(self.delay))
        if self.not_before is not None:
            set_header(result, "Upstash-Not-Before", str(self.not_before))
        if self.retries is not None:
            set_header(result, "Upstash-Retries", str(self.retries))
        if self.timeout is not None:
            set_header(result, "Upstash-Timeout", _duration(self.timeout))
        if self.callback:
            set_header(result, "Upstash-Callback", self.callback)
        if self.failure_callback:
            set_header(result, "Upstash-Failure-Callback", self.failure_callback)
        if self.deduplication_id:
            set_header(result, "Upstash-Deduplication-Id", self.deduplication_id)
        if self.content_based_deduplication:
            set_header(result, "Upstash-Content-Based-Deduplication", "true")

        return result


class MessageResponse(QStashModel):
    """Result of publishing a message to one destination."""

    message_id: str
    url: str | None = Field(default=None)
    deduplicated: bool | None = Field(default=None)


# A URL destination yields one response, a URL group one per endpoint
PublishResponse = MessageResponse | list[MessageResponse]


class BatchEntry(QStashModel):
    """One message in a ``/v2/batch`` request."""

    destination: str
    queue: str | None = Field(default=None)
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = Field(default=None)


class Message(QStashModel):
    """A message as stored by QStash."""

    message_id: str
    topic_name: str | None = Field(default=None)
    url: str | None = Field(default=None)
    method: str | None = Field(default=None)
    header: HeaderMap = Field(default_factory=dict)
    body: str | None = Field(default=None)
    created_at: int
