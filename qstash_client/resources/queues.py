"""Queue management."""

from ..models.queues import Queue, UpsertQueueRequest
from .base import Resource, segment


class Queues(Resource):
    async def upsert(self, queue_name: str, parallelism: int = 1) -> None:
        """Create a queue or update its parallelism."""
        request = UpsertQueueRequest(queue_name=queue_name, parallelism=parallelism)
        await self._http.request("POST", "/v2/queues/", json=request.to_wire())

    async def list(self) -> list[Queue]:
        return await self._http.request_model("GET", "/v2/queues/", list[Queue])

    async def get(self, queue_name: str) -> Queue:
        return await self._http.request_model("GET", f"/v2/queues/{segment(queue_name)}", Queue)

    async def delete(self, queue_name: str) -> None:
        await self._http.request("DELETE", f"/v2/queues/{segment(queue_name)}")

    async def pause(self, queue_name: str) -> None:
        """Stop delivering messages from the queue. Enqueueing still works."""
        await self._http.request("POST", f"/v2/queues/{segment(queue_name)}/pause")

    async def resume(self, queue_name: str) -> None:
        await self._http.request("POST", f"/v2/queues/{segment(queue_name)}/resume")
