"""
Month grid construction and event placement for the lesson calendar.

Pure functions, no network access.
"""

import calendar
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache

from core.config import DAYS_PER_WEEK, GRID_CELLS
from models.events import CalendarEvent
from services.holidays import HOLIDAYS_2025, HolidayTable, holiday_label


@dataclass(frozen=True)
class CalendarCell:
    """One rendered day of the month grid."""

    date: date
    is_current_month: bool
    is_today: bool
    holiday: str | None = None
    events: tuple[CalendarEvent, ...] = ()

    @property
    def visible_holiday(self) -> str | None:
        """Holiday label shown on the cell; adjacent-month holidays are hidden."""
        return self.holiday if self.is_current_month else None


# =============================================================================
# MONTH GRID
# =============================================================================


@lru_cache(maxsize=64)
def _grid_dates(year: int, month: int) -> tuple[date, ...]:
    first_of_month = date(year, month, 1)
    # date.weekday() is Monday=0; shift so Sunday is column 0
    leading = (first_of_month.weekday() + 1) % DAYS_PER_WEEK
    last_of_prev_month = first_of_month - timedelta(days=1)

    days = [last_of_prev_month - timedelta(days=i) for i in range(leading - 1, -1, -1)]

    num_days = calendar.monthrange(year, month)[1]
    days.extend(first_of_month + timedelta(days=i) for i in range(num_days))

    first_of_next_month = first_of_month + timedelta(days=num_days)
    days.extend(first_of_next_month + timedelta(days=i) for i in range(GRID_CELLS - len(days)))
    return tuple(days)


def month_grid(reference: date) -> list[date]:
    """
    Return the 42 dates (6 weeks, Sunday first) displayed for a month.

    Leading cells are the trailing days of the previous month, trailing cells
    the first days of the next month. The grid is always 6 weeks, even when
    the month fits in 5.
    """
    return list(_grid_dates(reference.year, reference.month))


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


# =============================================================================
# EVENT BINDING
# =============================================================================


def events_in_month(events: Iterable[CalendarEvent], year: int, month: int) -> list[CalendarEvent]:
    """Events whose start falls within the given month."""
    return [e for e in events if e.start.year == year and e.start.month == month]


def group_events_by_day(events: Iterable[CalendarEvent]) -> dict[date, list[CalendarEvent]]:
    """
    Group events by the local calendar day of their start.

    End time is ignored, so an event crossing midnight appears on its start
    day only. Events within a day are ordered by start time.
    """
    grouped: dict[date, list[CalendarEvent]] = defaultdict(list)
    for event in events:
        grouped[event.start.date()].append(event)
    for day_events in grouped.values():
        day_events.sort(key=lambda e: e.start)
    return dict(grouped)


def build_month_cells(
    reference: date,
    events: Iterable[CalendarEvent],
    today: date,
    holidays: HolidayTable = HOLIDAYS_2025,
) -> list[CalendarCell]:
    """
    Build the renderable grid for the reference month.

    Only events starting within the reference month are placed, so cells
    belonging to the previous or next month never carry events.
    """
    visible = events_in_month(events, reference.year, reference.month)
    by_day = group_events_by_day(visible)

    return [
        CalendarCell(
            date=d,
            is_current_month=(d.year == reference.year and d.month == reference.month),
            is_today=(d == today),
            holiday=holiday_label(d, holidays),
            events=tuple(by_day.get(d, ())),
        )
        for d in month_grid(reference)
    ]
