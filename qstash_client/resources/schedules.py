"""Cron schedules."""

from ..models.schedules import CreateScheduleResponse, Schedule, ScheduleOptions
from .base import Resource, segment


class Schedules(Resource):
    async def create(
        self,
        destination: str,
        body: bytes | str = b"",
        *,
        options: ScheduleOptions,
        headers: dict[str, str] | None = None,
    ) -> str:
        """
        Create (or, with ``options.schedule_id``, update) a schedule.

        ``destination`` is appended verbatim, so a query string in it is sent
        to QStash rather than kept in the destination.

        Returns:
            The schedule id
        """
        response = await self._http.request_model(
            "POST",
            f"/v2/schedules/{destination}",
            CreateScheduleResponse,
            headers=options.to_headers(headers),
            content=body.encode() if isinstance(body, str) else body,
        )
        return response.schedule_id

    async def get(self, schedule_id: str) -> Schedule:
        return await self._http.request_model("GET", f"/v2/schedules/{segment(schedule_id)}", Schedule)

    async def list(self) -> list[Schedule]:
        return await self._http.request_model("GET", "/v2/schedules", list[Schedule])

    async def delete(self, schedule_id: str) -> None:
        await self._http.request("DELETE", f"/v2/schedules/{segment(schedule_id)}")

    async def pause(self, schedule_id: str) -> None:
        await self._http.request("POST", f"/v2/schedules/{segment(schedule_id)}/pause")

    async def resume(self, schedule_id: str) -> None:
        await self._http.request("POST", f"/v2/schedules/{segment(schedule_id)}/resume")
