"""HTTP transport shared by all resource groups.

Every call goes through :meth:`HttpClient.request`, which attaches the bearer
token, sends the request with httpx and turns error statuses into typed
exceptions. There is no retry logic here: a 429 is surfaced to the caller as
one of the :class:`~qstash_client.errors.RateLimitError` subclasses.
"""

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import (
    ApiError,
    BurstRateLimitError,
    ChatRateLimitError,
    DailyRateLimitError,
    InvalidBaseUrlError,
    RateLimitError,
    RequestFailedError,
    ResponseParseError,
    UnspecifiedRateLimitError,
)
from .log import get_logger

T = TypeVar("T")

logger = get_logger("http")


def _parse_reset(headers: httpx.Headers, name: str) -> int:
    try:
        return int(headers.get(name, ""))
    except ValueError:
        return 0


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def rate_limit_error(response: httpx.Response) -> RateLimitError:
    """Pick the rate limit error matching the headers of a 429 response."""
    headers = response.headers
    body = _error_body(response)

    if "RateLimit-Limit" in headers:
        return DailyRateLimitError(_parse_reset(headers, "RateLimit-Reset"), body)
    if "Burst-RateLimit-Limit" in headers:
        return BurstRateLimitError(_parse_reset(headers, "Burst-RateLimit-Reset"), body)
    if "x-ratelimit-limit-requests" in headers:
        return ChatRateLimitError(
            reset_requests=_parse_reset(headers, "x-ratelimit-reset-requests"),
            reset_tokens=_parse_reset(headers, "x-ratelimit-reset-tokens"),
            body=body,
        )
    return UnspecifiedRateLimitError(body)


def api_error(response: httpx.Response) -> ApiError:
    """Build an ApiError from a non-2xx response."""
    body = _error_body(response)
    if isinstance(body, dict) and "error" in body:
        message = str(body["error"])
    else:
        message = response.text or response.reason_phrase
    return ApiError(response.status_code, message, body)


def parse_response(response: httpx.Response, response_type: Any) -> Any:
    """Validate a JSON response body against ``response_type``."""
    try:
        return TypeAdapter(response_type).validate_json(response.content)
    except ValidationError as e:
        raise ResponseParseError(f"Failed to parse response body: {e}") from e


class HttpClient:
    """Authenticated wrapper around ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as e:
            raise InvalidBaseUrlError(base_url) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidBaseUrlError(base_url)

        self.base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
        json: Any = None,
        params: list[tuple[str, str]] | None = None,
    ) -> httpx.Response:
        """Send a request and raise on any non-2xx status."""
        client = await self._get_client()

        try:
            response = await client.request(
                method,
                path,
                headers=headers,
                content=content,
                json=json,
                params=params,
            )
        except httpx.HTTPError as e:
            logger.warning("request_failed", method=method, path=path, error=type(e).__name__)
            raise RequestFailedError(f"Request failed: {e}") from e

        logger.debug("request", method=method, path=path, status=response.status_code)

        if response.status_code == 429:
            error = rate_limit_error(response)
            logger.warning("rate_limited", path=path, kind=type(error).__name__)
            raise error

        if not response.is_success:
            error = api_error(response)
            logger.warning("api_error", path=path, status=error.status_code, error=error.message)
            raise error

        return response

    async def request_model(self, method: str, path: str, response_type: type[T] | Any, **kwargs: Any) -> T:
        """Send a request and parse the JSON response into ``response_type``."""
        response = await self.request(method, path, **kwargs)
        return parse_response(response, response_type)

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
