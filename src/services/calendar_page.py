"""
Lesson calendar page controller.

Owns the reference month, the event store and the edit session. All remote
failures are caught here; the grid keeps showing the last fetched events and
an open session stays open with an error message so the user can retry.
"""

import logging
from collections.abc import Callable
from datetime import date
from enum import Enum

from core.config import LOGIN_PATH
from core.errors import (
    AuthenticationError,
    DraftValidationError,
    LessonCalendarError,
    NotFoundError,
)
from models.events import CalendarEvent
from services import edit_session as es
from services.calendar import CalendarCell, build_month_cells, next_month, prev_month
from services.event_store import EventStore
from services.holidays import HOLIDAYS_2025, HolidayTable

logger = logging.getLogger(__name__)

DELETE_CONFIRM_MESSAGE = "このイベントを削除してもよろしいですか？"


class PageView(str, Enum):
    CALENDAR = "calendar"
    LOGIN = "login"
    NOT_FOUND = "not_found"


class CalendarPage:
    """State and interactions of the lesson calendar page."""

    def __init__(
        self,
        store: EventStore,
        holidays: HolidayTable = HOLIDAYS_2025,
        today: Callable[[], date] = date.today,
        reference_date: date | None = None,
    ):
        self.store = store
        self.holidays = holidays
        self._today = today
        self.reference_date = (reference_date or today()).replace(day=1)
        self.session: es.EditSession = es.CLOSED
        self.view = PageView.CALENDAR
        self.last_error: str | None = None
        self.redirect_to: str | None = None

    # -------------------------------------------------------------------------
    # Grid
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return f"{self.reference_date.year}年 {self.reference_date.month}月"

    def cells(self) -> list[CalendarCell]:
        return build_month_cells(
            self.reference_date, self.store.events, self._today(), self.holidays
        )

    def show_prev_month(self) -> None:
        year, month = prev_month(self.reference_date.year, self.reference_date.month)
        self.reference_date = date(year, month, 1)

    def show_next_month(self) -> None:
        year, month = next_month(self.reference_date.year, self.reference_date.month)
        self.reference_date = date(year, month, 1)

    def show_month(self, year: int, month: int) -> None:
        self.reference_date = date(year, month, 1)

    # -------------------------------------------------------------------------
    # Remote state
    # -------------------------------------------------------------------------

    async def load(self) -> bool:
        """Fetch the event list. Returns False (and keeps old data) on failure."""
        try:
            await self.store.refresh()
        except LessonCalendarError as e:
            self._handle_remote_error("Loading lesson schedules", e)
            return False
        self.last_error = None
        self._close_if_target_removed()
        return True

    def _handle_remote_error(self, context: str, error: LessonCalendarError) -> str:
        logger.warning("%s failed: %s", context, error)
        if isinstance(error, AuthenticationError):
            self.view = PageView.LOGIN
            self.redirect_to = LOGIN_PATH
            message = "ログインの有効期限が切れました。再度ログインしてください。"
        else:
            message = f"{context} failed. Please try again."
        self.last_error = message
        return message

    def _close_if_target_removed(self) -> None:
        target = self.session.target_event_id
        if target is not None and self.store.get(target) is None:
            self.session = es.reduce(self.session, es.TargetRemoved(target))

    # -------------------------------------------------------------------------
    # Edit session
    # -------------------------------------------------------------------------

    def dispatch(self, action: es.Action) -> es.EditSession:
        self.session = es.reduce(self.session, action)
        return self.session

    def open_create(self) -> None:
        self.dispatch(es.OpenCreate())

    def open_event(self, event: CalendarEvent) -> None:
        self.dispatch(es.OpenEdit(event))

    async def open_event_by_id(self, event_id: int) -> bool:
        """Open an event fetched directly from the API; a missing event shows the not-found view."""
        try:
            event = await self.store.fetch(event_id)
        except NotFoundError:
            logger.info("Lesson schedule %s not found", event_id)
            self.view = PageView.NOT_FOUND
            return False
        except LessonCalendarError as e:
            self._handle_remote_error("Loading lesson schedule", e)
            return False
        self.open_event(event)
        return True

    def set_field(self, name: str, value: str) -> None:
        self.dispatch(es.SetField(name, value))

    def cancel(self) -> None:
        self.dispatch(es.Cancel())

    async def submit(self) -> bool:
        """
        Validate the draft and write it.

        Returns True when the write and the following refresh both succeeded
        and the session closed.
        """
        session = self.session
        if not session.is_open or session.pending:
            return False

        try:
            payload = es.build_payload(session.draft)
        except DraftValidationError as e:
            self.dispatch(es.WriteFailed(e.message))
            return False

        self.dispatch(es.WriteStarted())
        try:
            if session.mode is es.SessionMode.CREATE:
                await self.store.create(payload)
            else:
                await self.store.update(session.target_event_id, payload)
        except LessonCalendarError as e:
            self.dispatch(es.WriteFailed(self._handle_remote_error("Saving lesson schedule", e)))
            return False
        else:
            self.last_error = None
            self.dispatch(es.WriteSucceeded())
            return True
        finally:
            self._release_pending("Saving lesson schedule")

    async def delete(self, confirm: Callable[[str], bool]) -> bool:
        """Delete the event being edited after the user confirms."""
        session = self.session
        if not session.can_delete:
            return False
        if not confirm(DELETE_CONFIRM_MESSAGE):
            return False

        self.dispatch(es.WriteStarted())
        try:
            await self.store.delete(session.target_event_id)
        except LessonCalendarError as e:
            self.dispatch(es.WriteFailed(self._handle_remote_error("Deleting lesson schedule", e)))
            return False
        else:
            self.last_error = None
            self.dispatch(es.WriteSucceeded())
            return True
        finally:
            self._release_pending("Deleting lesson schedule")

    def _release_pending(self, context: str) -> None:
        """Reopen the session for retry when an unexpected error escaped a write."""
        if self.session.pending:
            logger.error("%s failed unexpectedly", context)
            message = f"{context} failed. Please try again."
            self.last_error = message
            self.dispatch(es.WriteFailed(message))
