"""URL groups, called topics in the REST paths."""

from ..models.url_groups import Endpoint, UrlGroup
from .base import Resource, segment


def _endpoints_body(endpoints: list[Endpoint]) -> dict:
    return {"endpoints": [endpoint.to_wire() for endpoint in endpoints]}


class UrlGroups(Resource):
    async def upsert_endpoints(self, url_group_name: str, endpoints: list[Endpoint]) -> None:
        """Add endpoints to a URL group, creating the group if needed."""
        await self._http.request(
            "POST",
            f"/v2/topics/{segment(url_group_name)}/endpoints",
            json=_endpoints_body(endpoints),
        )

    async def get(self, url_group_name: str) -> UrlGroup:
        return await self._http.request_model("GET", f"/v2/topics/{segment(url_group_name)}", UrlGroup)

    async def remove_endpoints(self, url_group_name: str, endpoints: list[Endpoint]) -> None:
        """Remove endpoints, matched by name or URL."""
        await self._http.request(
            "DELETE",
            f"/v2/topics/{segment(url_group_name)}/endpoints",
            json=_endpoints_body(endpoints),
        )

    async def delete(self, url_group_name: str) -> None:
        await self._http.request("DELETE", f"/v2/topics/{segment(url_group_name)}")

    async def list(self) -> list[UrlGroup]:
        return await self._http.request_model("GET", "/v2/topics", list[UrlGroup])
