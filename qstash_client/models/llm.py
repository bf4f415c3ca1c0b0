"""Chat completion models.

The LLM endpoint speaks the OpenAI wire format, so these models keep
snake_case field names instead of the camelCase used by the rest of the API.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatRole(str, Enum):
    SYSTEM = "system"
    ASSISTANT = "assistant"
    USER = "user"


class ResponseFormatType(str, Enum):
    TEXT = "text"
    JSON_OBJECT = "json_object"


class ChatMessage(BaseModel):
    """One message of a conversation."""

    role: ChatRole
    content: str
    name: str | None = Field(default=None)


class ResponseFormat(BaseModel):
    type: ResponseFormatType = Field(default=ResponseFormatType.TEXT)


class ChatCompletionRequest(BaseModel):
    """Request body for ``/llm/v1/chat/completions``."""

    model: str = Field(..., min_length=1)
    messages: list[ChatMessage] = Field(..., min_length=1)

    frequency_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    logit_bias: dict[str, int] | None = Field(default=None)
    logprobs: bool | None = Field(default=None)
    top_logprobs: int | None = Field(default=None, ge=0, le=20)
    max_tokens: int | None = Field(default=None, ge=1)
    n: int | None = Field(default=None, ge=1)
    presence_penalty: float | None = Field(default=None, ge=-2.0, le=2.0)
    response_format: ResponseFormat | None = Field(default=None)
    seed: int | None = Field(default=None)
    stop: list[str] | None = Field(default=None, max_length=4)
    stream: bool | None = Field(default=None)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str = Field(default=ChatRole.ASSISTANT.value)
    content: str | None = Field(default=None)


class ChatCompletionChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = Field(default=0)
    message: ChoiceMessage
    finish_reason: str | None = Field(default=None)
    logprobs: Any = Field(default=None)


class CompletionUsage(BaseModel):
    prompt_tokens: int = Field(default=0)
    completion_tokens: int = Field(default=0)
    total_tokens: int = Field(default=0)


class ChatCompletion(BaseModel):
    """Non-streaming chat completion response."""

    model_config = ConfigDict(extra="ignore")

    id: str
    object: str = Field(default="chat.completion")
    created: int = Field(default=0)
    model: str = Field(default="")
    choices: list[ChatCompletionChoice] = Field(default_factory=list)
    usage: CompletionUsage | None = Field(default=None)
    system_fingerprint: str | None = Field(default=None)

    @property
    def content(self) -> str | None:
        """Content of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content
