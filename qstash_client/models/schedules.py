"""Schedule models."""

from pydantic import AliasChoices, Field

from .base import HeaderMap, QStashModel
from .messages import PublishOptions, set_header


class ScheduleOptions(PublishOptions):
    """Publish options plus the cron expression for a schedule."""

    cron: str = Field(..., min_length=1)

    # Reusing an id updates the existing schedule
    schedule_id: str | None = Field(default=None)

    def to_headers(self, headers: dict[str, str] | None = None) -> dict[str, str]:
        result = super().to_headers(headers)
        set_header(result, "Upstash-Cron", self.cron)
        if self.schedule_id:
            set_header(result, "Upstash-Schedule-Id", self.schedule_id)
        return result


class CreateScheduleResponse(QStashModel):
    schedule_id: str


class Schedule(QStashModel):
    """A cron schedule."""

    created_at: int
    schedule_id: str = Field(
        validation_alias=AliasChoices("scheduleId", "id", "schedule_id"),
        serialization_alias="scheduleId",
    )
    cron: str
    destination: str
    method: str = Field(default="POST")
    header: HeaderMap = Field(default_factory=dict)
    body: str | None = Field(default=None)
    retries: int | None = Field(default=None)
    delay: int | None = Field(default=None)
    callback: str | None = Field(default=None)
    failure_callback: str | None = Field(default=None)
    is_paused: bool = Field(default=False)
