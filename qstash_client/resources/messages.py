"""Publishing, enqueueing and message management."""

import json
from typing import Any

from ..models.messages import (
    BatchEntry,
    Message,
    MessageResponse,
    PublishOptions,
    PublishResponse,
)
from .base import Resource, segment


def _json_body(payload: Any, options: PublishOptions | None) -> tuple[bytes, PublishOptions]:
    options = options.model_copy() if options else PublishOptions()
    if not options.content_type:
        options.content_type = "application/json"
    return json.dumps(payload).encode(), options


class Messages(Resource):
    """Calls under ``/v2/publish``, ``/v2/enqueue``, ``/v2/batch`` and ``/v2/messages``."""

    async def publish(
        self,
        destination: str,
        body: bytes | str = b"",
        *,
        options: PublishOptions | None = None,
        headers: dict[str, str] | None = None,
    ) -> PublishResponse:
        """
        Publish a message to a URL or URL group.

        Args:
            destination: Destination URL or URL group name, appended to the
                path verbatim. A query string in it becomes the query of the
                request to QStash rather than part of the destination.
            body: Raw message body
            options: Delivery options (delay, retries, callbacks...)
            headers: Headers to forward to the destination

        Returns:
            One MessageResponse for a URL, a list of them for a URL group
        """
        options = options or PublishOptions()
        return await self._http.request_model(
            "POST",
            f"/v2/publish/{destination}",
            PublishResponse,
            headers=options.to_headers(headers),
            content=body.encode() if isinstance(body, str) else body,
        )

    async def publish_json(
        self,
        destination: str,
        payload: Any,
        *,
        options: PublishOptions | None = None,
        headers: dict[str, str] | None = None,
    ) -> PublishResponse:
        """Publish a JSON-serializable payload."""
        body, options = _json_body(payload, options)
        return await self.publish(destination, body, options=options, headers=headers)

    async def enqueue(
        self,
        queue_name: str,
        destination: str,
        body: bytes | str = b"",
        *,
        options: PublishOptions | None = None,
        headers: dict[str, str] | None = None,
    ) -> PublishResponse:
        """Enqueue a message on a named queue.

        ``destination`` is appended verbatim, as in :meth:`publish`, so a query
        string in it is sent to QStash rather than kept in the destination.
        """
        options = options or PublishOptions()
        return await self._http.request_model(
            "POST",
            f"/v2/enqueue/{segment(queue_name)}/{destination}",
            PublishResponse,
            headers=options.to_headers(headers),
            content=body.encode() if isinstance(body, str) else body,
        )

    async def enqueue_json(
        self,
        queue_name: str,
        destination: str,
        payload: Any,
        *,
        options: PublishOptions | None = None,
        headers: dict[str, str] | None = None,
    ) -> PublishResponse:
        """Enqueue a JSON-serializable payload."""
        body, options = _json_body(payload, options)
        return await self.enqueue(queue_name, destination, body, options=options, headers=headers)

    async def batch(self, entries: list[BatchEntry]) -> list[PublishResponse]:
        """Publish several messages in one request."""
        return await self._http.request_model(
            "POST",
            "/v2/batch",
            list[MessageResponse | list[MessageResponse]],
            json=[entry.to_wire() for entry in entries],
        )

    async def get(self, message_id: str) -> Message:
        return await self._http.request_model("GET", f"/v2/messages/{segment(message_id)}", Message)

    async def cancel(self, message_id: str) -> None:
        """Cancel delivery of a pending message."""
        await self._http.request("DELETE", f"/v2/messages/{segment(message_id)}")

    async def cancel_many(self, message_ids: list[str]) -> None:
        """Cancel several pending messages."""
        await self._http.request("DELETE", "/v2/messages", json={"messageIds": message_ids})
