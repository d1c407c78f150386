"""
Edit session for creating or editing a single lesson schedule.

The session is an immutable value; `reduce(session, action)` returns the
next session. Network calls live in the page controller, which dispatches
the outcome back as actions.

States:
    closed       - no modal open
    create-draft - new event being drafted (mode=CREATE)
    edit-draft   - existing event being edited (mode=EDIT, target_event_id set)
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from enum import Enum

from core.config import DEFAULT_EVENT_COLOR, DEFAULT_EVENT_DURATION, DRAFT_DATE_FORMAT, DRAFT_TIME_FORMAT
from core.errors import DraftValidationError
from models.events import CalendarEvent, LessonSchedulePayload


class SessionMode(str, Enum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class EventDraft:
    """Form fields of an open session, as the user typed them."""

    title: str = ""
    start_date: str = ""  # YYYY-MM-DD
    start_time: str = ""  # HH:MM
    end_date: str = ""
    end_time: str = ""
    description: str = ""
    color: str = DEFAULT_EVENT_COLOR


DRAFT_FIELDS = frozenset(f.name for f in fields(EventDraft))


@dataclass(frozen=True)
class EditSession:
    mode: SessionMode = SessionMode.CLOSED
    target_event_id: int | None = None
    draft: EventDraft = EventDraft()
    error: str | None = None
    pending: bool = False

    @property
    def is_open(self) -> bool:
        return self.mode is not SessionMode.CLOSED

    @property
    def can_delete(self) -> bool:
        return self.mode is SessionMode.EDIT and not self.pending


CLOSED = EditSession()


# =============================================================================
# ACTIONS
# =============================================================================


@dataclass(frozen=True)
class OpenCreate:
    pass


@dataclass(frozen=True)
class OpenEdit:
    event: CalendarEvent


@dataclass(frozen=True)
class SetField:
    name: str
    value: str


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class WriteStarted:
    pass


@dataclass(frozen=True)
class WriteFailed:
    message: str


@dataclass(frozen=True)
class WriteSucceeded:
    pass


@dataclass(frozen=True)
class TargetRemoved:
    event_id: int


Action = OpenCreate | OpenEdit | SetField | Cancel | WriteStarted | WriteFailed | WriteSucceeded | TargetRemoved


# =============================================================================
# DRAFT CONVERSION
# =============================================================================


def draft_from_event(event: CalendarEvent) -> EventDraft:
    """Split an event's start/end into local date and time fields."""
    return EventDraft(
        title=event.title,
        start_date=event.start.strftime(DRAFT_DATE_FORMAT),
        start_time=event.start.strftime(DRAFT_TIME_FORMAT),
        end_date=event.end.strftime(DRAFT_DATE_FORMAT),
        end_time=event.end.strftime(DRAFT_TIME_FORMAT),
        description=event.description,
        color=event.color or DEFAULT_EVENT_COLOR,
    )


def _parse_timestamp(date_str: str, time_str: str) -> datetime:
    try:
        return datetime.strptime(
            f"{date_str.strip()} {time_str.strip()}", f"{DRAFT_DATE_FORMAT} {DRAFT_TIME_FORMAT}"
        )
    except ValueError:
        raise DraftValidationError(
            DraftValidationError.INVALID_DATETIME,
            f"Invalid date or time: '{date_str} {time_str}'",
        )


def build_payload(draft: EventDraft) -> LessonSchedulePayload:
    """
    Validate a draft and build the request body.

    Checks, first failure wins:
    1. Title, start date and start time are present
    2. If both end date and end time are given, end is not before start
    3. Otherwise end defaults to start + 1 hour

    Raises:
        DraftValidationError: with REQUIRED_FIELDS, INVALID_DATETIME or END_BEFORE_START
    """
    if not draft.title.strip() or not draft.start_date.strip() or not draft.start_time.strip():
        raise DraftValidationError(
            DraftValidationError.REQUIRED_FIELDS,
            "Title, start date and start time are required",
        )

    start = _parse_timestamp(draft.start_date, draft.start_time)

    if draft.end_date.strip() and draft.end_time.strip():
        end = _parse_timestamp(draft.end_date, draft.end_time)
        if end < start:
            raise DraftValidationError(
                DraftValidationError.END_BEFORE_START,
                "End time must not be before start time",
            )
    else:
        end = start + DEFAULT_EVENT_DURATION

    return LessonSchedulePayload(
        title=draft.title,
        start_time=start,
        end_time=end,
        description=draft.description,
        color=draft.color or DEFAULT_EVENT_COLOR,
    )


# =============================================================================
# TRANSITIONS
# =============================================================================


def reduce(session: EditSession, action: Action) -> EditSession:
    """Return the session that results from applying `action`."""
    if isinstance(action, OpenCreate):
        if session.is_open:
            return session
        return EditSession(mode=SessionMode.CREATE)

    if isinstance(action, OpenEdit):
        if session.is_open:
            return session
        return EditSession(
            mode=SessionMode.EDIT,
            target_event_id=action.event.id,
            draft=draft_from_event(action.event),
        )

    if not session.is_open:
        return session

    if isinstance(action, SetField):
        if action.name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown draft field '{action.name}'")
        return replace(session, draft=replace(session.draft, **{action.name: action.value}))

    if isinstance(action, Cancel):
        return CLOSED

    if isinstance(action, WriteStarted):
        return replace(session, pending=True, error=None)

    if isinstance(action, WriteFailed):
        return replace(session, pending=False, error=action.message)

    if isinstance(action, WriteSucceeded):
        return CLOSED

    if isinstance(action, TargetRemoved):
        if session.mode is SessionMode.EDIT and session.target_event_id == action.event_id:
            return CLOSED
        return session

    raise TypeError(f"Unsupported action {action!r}")
