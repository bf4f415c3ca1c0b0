"""Exceptions raised by the QStash client."""

from typing import Any


class QStashError(Exception):
    """Base exception for the QStash client."""

    pass


class InvalidBaseUrlError(QStashError):
    """Raised when the configured base URL is not an absolute http(s) URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid base URL: {url}")


class RequestFailedError(QStashError):
    """Raised when the HTTP request could not be completed."""

    pass


class ResponseParseError(QStashError):
    """Raised when a response body does not match the expected shape."""

    pass


class SignatureError(QStashError):
    """Raised when a webhook signature fails verification."""

    pass


class ApiError(QStashError):
    """Raised for non-2xx responses from the QStash API."""

    def __init__(self, status_code: int, message: str, body: Any = None):
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(f"QStash API error {status_code}: {message}")


class RateLimitError(ApiError):
    """Base class for 429 responses."""

    def __init__(self, message: str, body: Any = None):
        super().__init__(429, message, body)


class DailyRateLimitError(RateLimitError):
    """Daily request quota exhausted."""

    def __init__(self, reset: int, body: Any = None):
        self.reset = reset
        super().__init__(f"Daily rate limit exceeded. Retry after: {reset}", body)


class BurstRateLimitError(RateLimitError):
    """Burst rate limit exceeded."""

    def __init__(self, reset: int, body: Any = None):
        self.reset = reset
        super().__init__(f"Burst rate limit exceeded. Retry after: {reset}", body)


class ChatRateLimitError(RateLimitError):
    """LLM request or token limit exceeded."""

    def __init__(self, reset_requests: int, reset_tokens: int, body: Any = None):
        self.reset_requests = reset_requests
        self.reset_tokens = reset_tokens
        super().__init__(
            "Chat rate limit exceeded. Retry after requests reset: "
            f"{reset_requests}, tokens reset: {reset_tokens}",
            body,
        )


class UnspecifiedRateLimitError(RateLimitError):
    """429 without any known rate limit headers."""

    def __init__(self, body: Any = None):
        super().__init__("Rate limit exceeded, but no details provided", body)
