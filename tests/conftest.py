"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.main import create_app  # noqa: E402
from api.repository import InMemoryLessonScheduleRepository, sample_records  # noqa: E402
from core.api_client import build_api_client  # noqa: E402
from core.config import DEV_API_TOKEN  # noqa: E402
from models.events import CalendarEvent  # noqa: E402
from services.calendar_page import CalendarPage  # noqa: E402
from services.event_store import EventStore  # noqa: E402
from services.lesson_schedules import LessonScheduleClient  # noqa: E402


@pytest.fixture
def sample_event():
    """Sample calendar event for testing."""
    return CalendarEvent(
        id=1,
        title="生徒Aとの面談",
        start=datetime(2025, 5, 25, 10, 0),
        end=datetime(2025, 5, 25, 11, 0),
        description="来学期の学習計画について",
        color="#FFDDC1",
    )


@pytest.fixture
def sample_events(sample_event):
    """List of sample events spanning May and June 2025."""
    return [
        sample_event,
        CalendarEvent(
            id=2,
            title="全体講師ミーティング",
            start=datetime(2025, 5, 28, 14, 0),
            end=datetime(2025, 5, 28, 15, 30),
            color="#C1E1FF",
        ),
        CalendarEvent(
            id=4,
            title="資料作成締め切り",
            start=datetime(2025, 6, 1, 9, 0),
            end=datetime(2025, 6, 1, 17, 0),
            color="#FFC1C1",
        ),
    ]


@pytest.fixture
def repository():
    """Development repository seeded with the four sample lessons."""
    return InMemoryLessonScheduleRepository(sample_records())


@pytest.fixture
def dev_app(repository):
    return create_app(repository)


@pytest_asyncio.fixture
async def http_client(dev_app):
    """AsyncClient talking to the development API in-process."""
    client = build_api_client(
        base_url="http://testserver",
        token_provider=lambda: DEV_API_TOKEN,
        transport=httpx.ASGITransport(app=dev_app),
    )
    async with client:
        yield client


@pytest.fixture
def schedule_client(http_client):
    return LessonScheduleClient(http_client)


@pytest.fixture
def store(schedule_client):
    return EventStore(schedule_client)


@pytest.fixture
def page(store):
    return CalendarPage(
        store,
        today=lambda: datetime(2025, 5, 15).date(),
        reference_date=datetime(2025, 5, 1).date(),
    )
