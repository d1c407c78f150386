#!/usr/bin/env python3
"""
Print a month of the lesson calendar from the lesson schedule API.

Usage:
    uv run python src/scripts/show_calendar.py --month 2025-05
"""

import argparse
import asyncio
import logging
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.api_client import get_api_client
from core.config import DAYS_PER_WEEK, LOG_FORMAT, LOG_LEVEL, WEEKDAY_LABELS
from services.calendar import CalendarCell
from services.calendar_page import CalendarPage
from services.event_store import EventStore
from services.lesson_schedules import LessonScheduleClient

CELL_WIDTH = 14


def parse_month(month_str: str | None) -> date:
    """Parse YYYY-MM to the first of that month. Uses this month if None."""
    if not month_str:
        return date.today().replace(day=1)
    return datetime.strptime(month_str, "%Y-%m").date()


def format_cell_lines(cell: CalendarCell) -> list[str]:
    """Lines shown inside one cell: day number, holiday, event titles."""
    marker = "*" if cell.is_today else ""
    day = f"{cell.date.day}{marker}"
    lines = [day if cell.is_current_month else f"({day})"]
    if cell.visible_holiday:
        lines.append(cell.visible_holiday)
    for event in cell.events:
        lines.append(f"{event.start:%H:%M} {event.title}")
    return lines


def render_grid(page: CalendarPage) -> str:
    """Render the 6-week grid as fixed-width text."""
    separator = "+" + "+".join("-" * CELL_WIDTH for _ in range(DAYS_PER_WEEK)) + "+"
    out = [page.title, separator]
    out.append("|" + "|".join(label.center(CELL_WIDTH - 1) for label in WEEKDAY_LABELS) + "|")
    out.append(separator)

    cells = page.cells()
    for week_start in range(0, len(cells), DAYS_PER_WEEK):
        week = [format_cell_lines(c) for c in cells[week_start:week_start + DAYS_PER_WEEK]]
        height = max(len(lines) for lines in week)
        for row in range(height):
            parts = []
            for lines in week:
                text = lines[row] if row < len(lines) else ""
                parts.append(text[:CELL_WIDTH].ljust(CELL_WIDTH))
            out.append("|" + "|".join(parts) + "|")
        out.append(separator)
    return "\n".join(out)


async def main():
    parser = argparse.ArgumentParser(description="Print a month of the lesson calendar")
    parser.add_argument("--month", help="Month to show (YYYY-MM). Defaults to this month.")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    http = get_api_client()
    try:
        page = CalendarPage(EventStore(LessonScheduleClient(http)), reference_date=parse_month(args.month))
        loaded = await page.load()
    finally:
        await http.aclose()

    if not loaded:
        print(f"\nError: {page.last_error}")
        sys.exit(1)

    print(render_grid(page))


if __name__ == "__main__":
    asyncio.run(main())
