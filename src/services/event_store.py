"""
Client-side cache of lesson schedules.

The remote API is the source of truth. Every write is followed by a full
list refetch, and the cached collection is only ever replaced wholesale.
"""

from models.events import CalendarEvent, LessonSchedulePayload
from services.lesson_schedules import LessonScheduleClient


class EventStore:
    """Ordered, read-only view of the last fetched lesson schedules."""

    def __init__(self, client: LessonScheduleClient):
        self._client = client
        self._events: tuple[CalendarEvent, ...] = ()

    @property
    def events(self) -> tuple[CalendarEvent, ...]:
        return self._events

    def get(self, event_id: int) -> CalendarEvent | None:
        return next((e for e in self._events if e.id == event_id), None)

    async def refresh(self) -> tuple[CalendarEvent, ...]:
        """Replace the cache with a fresh list fetch. On failure the cache is untouched."""
        events = await self._client.list_events()
        self._events = tuple(events)
        return self._events

    async def create(self, payload: LessonSchedulePayload) -> CalendarEvent:
        created = await self._client.create_event(payload)
        await self.refresh()
        return created

    async def update(self, event_id: int, payload: LessonSchedulePayload) -> CalendarEvent:
        updated = await self._client.update_event(event_id, payload)
        await self.refresh()
        return updated

    async def delete(self, event_id: int) -> None:
        await self._client.delete_event(event_id)
        await self.refresh()

    async def fetch(self, event_id: int) -> CalendarEvent:
        """Fetch a single event without touching the cache."""
        return await self._client.get_event(event_id)
