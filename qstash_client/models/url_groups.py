"""URL group (topic) models."""

from pydantic import Field

from .base import QStashModel


class Endpoint(QStashModel):
    """One endpoint of a URL group. Unset fields are left out of requests."""

    name: str | None = Field(default=None)
    url: str | None = Field(default=None)


class UrlGroup(QStashModel):
    created_at: int = Field(default=0)
    updated_at: int = Field(default=0)
    name: str = Field(default="")
    endpoints: list[Endpoint] = Field(default_factory=list)
