"""
Data models for lesson schedule events.

`LessonScheduleRecord` is the wire shape returned by the API and
`LessonSchedulePayload` the body sent on create/update. Records are converted
to the internal `CalendarEvent`, which holds naive local
wall-clock datetimes.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from core.config import DEFAULT_EVENT_COLOR


def to_local(value: datetime) -> datetime:
    """Convert a timestamp to naive local wall-clock time."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def to_wire_timestamp(value: datetime) -> str:
    """Format a timestamp as ISO 8601 with the local UTC offset."""
    return value.astimezone().isoformat()


class CalendarEvent(BaseModel):
    """A lesson schedule entry as shown on the calendar."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None  # None until the API assigns one
    title: str = Field(min_length=1)
    start: datetime
    end: datetime
    description: str = ""
    color: str = DEFAULT_EVENT_COLOR

    @field_validator("start", "end")
    @classmethod
    def _localize(cls, value: datetime) -> datetime:
        return to_local(value)

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, value):
        return value or ""

    @field_validator("color", mode="before")
    @classmethod
    def _default_color(cls, value):
        return value or DEFAULT_EVENT_COLOR

    @model_validator(mode="after")
    def _end_not_before_start(self):
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self


class LessonScheduleRecord(BaseModel):
    """Lesson schedule record as returned by `/lesson-schedules/`."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = Field(min_length=1)
    start_time: datetime
    end_time: datetime
    description: str | None = None
    color: str | None = None

    def to_event(self) -> CalendarEvent:
        return CalendarEvent(
            id=self.id,
            title=self.title,
            start=self.start_time,
            end=self.end_time,
            description=self.description,
            color=self.color,
        )


class LessonSchedulePayload(BaseModel):
    """Request body for creating or replacing a lesson schedule."""

    title: str = Field(min_length=1)
    start_time: datetime
    end_time: datetime
    description: str = ""
    color: str = DEFAULT_EVENT_COLOR

    @model_validator(mode="after")
    def _end_not_before_start(self):
        if to_local(self.end_time) < to_local(self.start_time):
            raise ValueError("end_time must not be before start_time")
        return self

    @field_serializer("start_time", "end_time", when_used="json")
    def _serialize_timestamp(self, value: datetime) -> str:
        return to_wire_timestamp(value)
