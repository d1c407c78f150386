#!/usr/bin/env python3
"""
Add a lesson schedule through the calendar edit session.

Usage:
    uv run python src/scripts/add_lesson.py "個別指導（生徒C）" 2025-05-30 18:00
    uv run python src/scripts/add_lesson.py "面談" 2025-05-30 18:00 --end 2025-05-30 19:30
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.api_client import get_api_client
from core.config import DEFAULT_EVENT_COLOR, LOG_FORMAT, LOG_LEVEL
from services.calendar_page import CalendarPage
from services.event_store import EventStore
from services.lesson_schedules import LessonScheduleClient


async def main():
    parser = argparse.ArgumentParser(description="Add a lesson schedule")
    parser.add_argument("title", help="Lesson title")
    parser.add_argument("start_date", help="Start date (YYYY-MM-DD)")
    parser.add_argument("start_time", help="Start time (HH:MM)")
    parser.add_argument("--end", nargs=2, metavar=("DATE", "TIME"), help="End date and time")
    parser.add_argument("--description", default="", help="Free-text description")
    parser.add_argument("--color", default=DEFAULT_EVENT_COLOR, help="Display color (#RRGGBB)")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    http = get_api_client()
    try:
        page = CalendarPage(EventStore(LessonScheduleClient(http)))
        page.open_create()
        page.set_field("title", args.title)
        page.set_field("start_date", args.start_date)
        page.set_field("start_time", args.start_time)
        if args.end:
            page.set_field("end_date", args.end[0])
            page.set_field("end_time", args.end[1])
        page.set_field("description", args.description)
        page.set_field("color", args.color)
        saved = await page.submit()
    finally:
        await http.aclose()

    if not saved:
        print(f"\nError: {page.session.error}")
        sys.exit(1)

    print(f"\nLesson added. {len(page.store.events)} lesson schedules on the server.")


if __name__ == "__main__":
    asyncio.run(main())
