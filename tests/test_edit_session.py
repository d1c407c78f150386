"""Tests for the edit session reducer and draft validation."""

from datetime import datetime

import pytest

from core.config import DEFAULT_EVENT_COLOR
from core.errors import DraftValidationError
from services.edit_session import (
    CLOSED,
    Cancel,
    EditSession,
    EventDraft,
    OpenCreate,
    OpenEdit,
    SessionMode,
    SetField,
    TargetRemoved,
    WriteFailed,
    WriteStarted,
    WriteSucceeded,
    build_payload,
    draft_from_event,
    reduce,
)


def fill(session, **values):
    for name, value in values.items():
        session = reduce(session, SetField(name, value))
    return session


class TestTransitions:
    def test_open_create_starts_blank(self):
        session = reduce(CLOSED, OpenCreate())

        assert session.mode is SessionMode.CREATE
        assert session.target_event_id is None
        assert session.draft == EventDraft()
        assert session.draft.color == DEFAULT_EVENT_COLOR

    def test_open_edit_populates_draft(self, sample_event):
        session = reduce(CLOSED, OpenEdit(sample_event))

        assert session.mode is SessionMode.EDIT
        assert session.target_event_id == 1
        assert session.draft.title == "生徒Aとの面談"
        assert session.draft.start_date == "2025-05-25"
        assert session.draft.start_time == "10:00"
        assert session.draft.end_date == "2025-05-25"
        assert session.draft.end_time == "11:00"
        assert session.draft.description == "来学期の学習計画について"

    def test_open_is_ignored_while_a_session_is_open(self, sample_event):
        session = fill(reduce(CLOSED, OpenCreate()), title="draft")

        assert reduce(session, OpenEdit(sample_event)) is session
        assert reduce(session, OpenCreate()) is session

    def test_set_field_updates_one_field(self):
        session = fill(reduce(CLOSED, OpenCreate()), title="面談", start_date="2025-05-25")

        assert session.draft.title == "面談"
        assert session.draft.start_date == "2025-05-25"
        assert session.draft.start_time == ""

    def test_set_field_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            reduce(reduce(CLOSED, OpenCreate()), SetField("location", "教室A"))

    def test_actions_on_closed_session_are_ignored(self):
        assert reduce(CLOSED, SetField("title", "x")) is CLOSED
        assert reduce(CLOSED, Cancel()) is CLOSED
        assert reduce(CLOSED, WriteSucceeded()) is CLOSED

    def test_cancel_discards_draft(self):
        session = fill(reduce(CLOSED, OpenCreate()), title="面談")
        assert reduce(session, Cancel()) == EditSession()

    def test_write_lifecycle(self, sample_event):
        session = reduce(CLOSED, OpenEdit(sample_event))

        session = reduce(session, WriteStarted())
        assert session.pending
        assert not session.can_delete

        session = reduce(session, WriteFailed("Saving lesson schedule failed. Please try again."))
        assert session.is_open
        assert not session.pending
        assert session.error.startswith("Saving")
        assert session.draft.title == sample_event.title

        session = reduce(session, WriteStarted())
        assert session.error is None
        assert reduce(session, WriteSucceeded()) is CLOSED

    def test_delete_only_available_when_editing(self, sample_event):
        assert not reduce(CLOSED, OpenCreate()).can_delete
        assert reduce(CLOSED, OpenEdit(sample_event)).can_delete

    def test_target_removed_closes_matching_edit(self, sample_event):
        session = reduce(CLOSED, OpenEdit(sample_event))

        assert reduce(session, TargetRemoved(2)) is session
        assert reduce(session, TargetRemoved(1)) is CLOSED


class TestBuildPayload:
    def test_default_end_is_one_hour_after_start(self):
        payload = build_payload(
            EventDraft(title="面談", start_date="2025-05-25", start_time="10:00")
        )

        assert payload.start_time == datetime(2025, 5, 25, 10, 0)
        assert payload.end_time == datetime(2025, 5, 25, 11, 0)
        assert payload.color == DEFAULT_EVENT_COLOR

    def test_partial_end_is_replaced_by_default(self):
        payload = build_payload(
            EventDraft(title="面談", start_date="2025-05-25", start_time="10:00", end_date="2025-05-26")
        )
        assert payload.end_time == datetime(2025, 5, 25, 11, 0)

    def test_explicit_end(self):
        payload = build_payload(
            EventDraft(
                title="面談",
                start_date="2025-05-25",
                start_time="23:30",
                end_date="2025-05-26",
                end_time="00:15",
                description="延長",
                color="#C1E1FF",
            )
        )
        assert payload.end_time == datetime(2025, 5, 26, 0, 15)
        assert payload.description == "延長"
        assert payload.color == "#C1E1FF"

    def test_end_equal_to_start_is_allowed(self):
        payload = build_payload(
            EventDraft(title="面談", start_date="2025-05-25", start_time="10:00", end_date="2025-05-25", end_time="10:00")
        )
        assert payload.end_time == payload.start_time

    @pytest.mark.parametrize(
        "draft",
        [
            EventDraft(start_date="2025-05-25", start_time="10:00"),
            EventDraft(title="   ", start_date="2025-05-25", start_time="10:00"),
            EventDraft(title="面談", start_time="10:00"),
            EventDraft(title="面談", start_date="2025-05-25"),
            # required-field check wins over the end-before-start check
            EventDraft(title="", start_date="2025-05-25", start_time="10:00", end_date="2025-05-24", end_time="09:00"),
        ],
    )
    def test_required_fields(self, draft):
        with pytest.raises(DraftValidationError) as exc_info:
            build_payload(draft)
        assert exc_info.value.code == DraftValidationError.REQUIRED_FIELDS

    def test_end_before_start(self):
        with pytest.raises(DraftValidationError) as exc_info:
            build_payload(
                EventDraft(title="面談", start_date="2025-05-25", start_time="10:00", end_date="2025-05-25", end_time="09:59")
            )
        assert exc_info.value.code == DraftValidationError.END_BEFORE_START

    @pytest.mark.parametrize(
        "start_date, start_time",
        [
            ("2025-13-01", "10:00"),
            ("2025-05-25", "25:00"),
            ("tomorrow", "10:00"),
            ("2025-05-25", "10:00Z"),
            ("2025-05-25", "10:00+09:00"),
            ("2025-05-25", "10:00:30"),
        ],
    )
    def test_invalid_datetime(self, start_date, start_time):
        with pytest.raises(DraftValidationError) as exc_info:
            build_payload(EventDraft(title="面談", start_date=start_date, start_time=start_time))
        assert exc_info.value.code == DraftValidationError.INVALID_DATETIME

    def test_offset_start_with_plain_end(self):
        draft = EventDraft(
            title="面談",
            start_date="2025-05-25",
            start_time="10:00Z",
            end_date="2025-05-25",
            end_time="11:00",
        )
        with pytest.raises(DraftValidationError) as exc_info:
            build_payload(draft)
        assert exc_info.value.code == DraftValidationError.INVALID_DATETIME


def test_draft_round_trip(sample_event):
    payload = build_payload(draft_from_event(sample_event))

    assert payload.start_time == sample_event.start
    assert payload.end_time == sample_event.end
    assert payload.title == sample_event.title
