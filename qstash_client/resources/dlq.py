"""Dead-letter queue."""

from collections.abc import AsyncIterator

from ..models.dlq import DeleteDlqResponse, DlqListResponse, DlqMessage, DlqRequest
from .base import Resource, segment


class DeadLetterQueue(Resource):
    async def get(self, dlq_id: str) -> DlqMessage:
        return await self._http.request_model("GET", f"/v2/dlq/{segment(dlq_id)}", DlqMessage)

    async def delete(self, dlq_id: str) -> None:
        await self._http.request("DELETE", f"/v2/dlq/{segment(dlq_id)}")

    async def delete_many(self, dlq_ids: list[str]) -> int:
        """Delete several DLQ entries. Returns the number deleted."""
        response = await self._http.request_model(
            "DELETE",
            "/v2/dlq",
            DeleteDlqResponse,
            json={"dlqIds": dlq_ids},
        )
        return response.deleted

    async def iterate(self, request: DlqRequest | None = None) -> AsyncIterator[DlqMessage]:
        """Yield every matching DLQ entry, following the pagination cursor."""
        request = request or DlqRequest()
        while True:
            page = await self.list(request)
            for message in page.messages:
                yield message
            if not page.cursor:
                return
            request = request.model_copy(update={"cursor": page.cursor})

    async def list(self, request: DlqRequest | None = None) -> DlqListResponse:
        """Fetch one page of DLQ entries."""
        request = request or DlqRequest()
        return await self._http.request_model(
            "GET",
            "/v2/dlq",
            DlqListResponse,
            params=request.to_query_params(),
        )
