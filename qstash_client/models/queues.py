"""Queue models."""

from pydantic import Field

from .base import QStashModel


class UpsertQueueRequest(QStashModel):
    queue_name: str = Field(..., min_length=1)
    parallelism: int = Field(default=1, ge=1)


class Queue(QStashModel):
    """Queue metadata. Timestamps are Unix milliseconds."""

    created_at: int
    updated_at: int
    name: str

    # Number of parallel consumers
    parallelism: int = Field(default=1)

    # Unprocessed messages waiting in the queue
    lag: int = Field(default=0)

    paused: bool = Field(default=False)
