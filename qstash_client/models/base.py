"""Shared base classes for wire models."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Header maps as returned by the API: name -> list of values
HeaderMap = dict[str, list[str]]


class QStashModel(BaseModel):
    """Model with camelCase aliases on the wire and snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump as a JSON-ready dict, camelCase keys, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class QueryParams(QStashModel):
    """Filter model rendered as URL query parameters."""

    def to_query_params(self) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs for every filter that is set."""
        return [(name, str(value)) for name, value in self.to_wire().items()]
