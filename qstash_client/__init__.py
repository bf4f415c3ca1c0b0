"""Async client for Upstash QStash."""

from .client import QStashClient
from .config import Settings, get_settings
from .errors import (
    ApiError,
    BurstRateLimitError,
    ChatRateLimitError,
    DailyRateLimitError,
    InvalidBaseUrlError,
    QStashError,
    RateLimitError,
    RequestFailedError,
    ResponseParseError,
    SignatureError,
    UnspecifiedRateLimitError,
)
from .log import configure_logging
from .models import (
    BatchEntry,
    ChatCompletionRequest,
    ChatMessage,
    Endpoint,
    EventsRequest,
    EventState,
    DlqRequest,
    PublishOptions,
    ScheduleOptions,
)
from .receiver import Receiver

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "BatchEntry",
    "BurstRateLimitError",
    "ChatCompletionRequest",
    "ChatMessage",
    "ChatRateLimitError",
    "DailyRateLimitError",
    "DlqRequest",
    "Endpoint",
    "EventState",
    "EventsRequest",
    "InvalidBaseUrlError",
    "PublishOptions",
    "QStashClient",
    "QStashError",
    "RateLimitError",
    "Receiver",
    "RequestFailedError",
    "ResponseParseError",
    "ScheduleOptions",
    "Settings",
    "SignatureError",
    "UnspecifiedRateLimitError",
    "configure_logging",
    "get_settings",
]
