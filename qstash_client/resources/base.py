"""Base class for resource groups."""

from urllib.parse import quote

from ..http import HttpClient


def segment(value: str) -> str:
    """URL-encode a name or id for use as a single path segment."""
    return quote(value, safe="")


class Resource:
    """A group of API calls sharing one HTTP client."""

    def __init__(self, http: HttpClient):
        self._http = http
