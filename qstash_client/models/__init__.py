"""Request and response models for the QStash API."""

from .dlq import DeleteDlqResponse, DlqListResponse, DlqMessage, DlqRequest
from .events import Event, EventsRequest, EventsResponse, EventState
from .llm import (
    ChatCompletion,
    ChatCompletionRequest,
    ChatMessage,
    ChatRole,
    ResponseFormat,
    ResponseFormatType,
)
from .messages import BatchEntry, Message, MessageResponse, PublishOptions, PublishResponse
from .queues import Queue, UpsertQueueRequest
from .schedules import CreateScheduleResponse, Schedule, ScheduleOptions
from .signing_keys import SigningKeys
from .url_groups import Endpoint, UrlGroup

__all__ = [
    "BatchEntry",
    "ChatCompletion",
    "ChatCompletionRequest",
    "ChatMessage",
    "ChatRole",
    "CreateScheduleResponse",
    "DeleteDlqResponse",
    "DlqListResponse",
    "DlqMessage",
    "DlqRequest",
    "Endpoint",
    "Event",
    "EventState",
    "EventsRequest",
    "EventsResponse",
    "Message",
    "MessageResponse",
    "PublishOptions",
    "PublishResponse",
    "Queue",
    "ResponseFormat",
    "ResponseFormatType",
    "Schedule",
    "ScheduleOptions",
    "SigningKeys",
    "UpsertQueueRequest",
    "UrlGroup",
]
