"""Event log."""

from collections.abc import AsyncIterator

from ..models.events import Event, EventsRequest, EventsResponse
from .base import Resource


class Events(Resource):
    async def iterate(self, request: EventsRequest | None = None) -> AsyncIterator[Event]:
        """Yield every matching event, following the pagination cursor."""
        request = request or EventsRequest()
        while True:
            page = await self.list(request)
            for event in page.events:
                yield event
            if not page.cursor:
                return
            request = request.model_copy(update={"cursor": page.cursor})

    async def list(self, request: EventsRequest | None = None) -> EventsResponse:
        """Fetch one page of events."""
        request = request or EventsRequest()
        return await self._http.request_model(
            "GET",
            "/v2/events",
            EventsResponse,
            params=request.to_query_params(),
        )
