"""
Lesson schedule fetching and writing against the REST API.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from core.api_client import get_api_client
from core.config import LESSON_SCHEDULES_PATH
from core.errors import (
    ApiResponseError,
    ApiTransportError,
    AuthenticationError,
    NotFoundError,
    RecordDecodingError,
)
from models.events import CalendarEvent, LessonSchedulePayload, LessonScheduleRecord

logger = logging.getLogger(__name__)


def parse_record(raw: Any) -> CalendarEvent:
    """Validate one wire record and convert it to a CalendarEvent."""
    try:
        return LessonScheduleRecord.model_validate(raw).to_event()
    except ValidationError as e:
        raise RecordDecodingError(f"Malformed lesson schedule record: {e}") from e


def parse_records(raw: Any) -> list[CalendarEvent]:
    """Validate a list response. Any malformed record fails the whole list."""
    if not isinstance(raw, list):
        raise RecordDecodingError(
            f"Expected a list of lesson schedules, got {type(raw).__name__}"
        )
    return [parse_record(item) for item in raw]


def schedule_path(event_id: int) -> str:
    return f"{LESSON_SCHEDULES_PATH}{event_id}/"


class LessonScheduleClient:
    """Typed access to the `/lesson-schedules/` endpoints."""

    def __init__(self, http: httpx.AsyncClient | None = None):
        self._http = http or get_api_client()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise ApiTransportError(f"{method} {url} timed out") from e
        except httpx.RequestError as e:
            # Connection failures, bad Content-Encoding bodies, redirect loops
            raise ApiTransportError(f"{method} {url} failed: {e}") from e

        if response.is_success:
            return response

        message = f"{method} {url} returned {response.status_code}"
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise AuthenticationError(response.status_code, message)
        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(response.status_code, message)
        raise ApiResponseError(response.status_code, message)

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RecordDecodingError(f"Response body is not JSON: {e}") from e

    async def list_events(self) -> list[CalendarEvent]:
        response = await self._request("GET", LESSON_SCHEDULES_PATH)
        events = parse_records(self._json(response))
        logger.debug("Fetched %d lesson schedules", len(events))
        return events

    async def get_event(self, event_id: int) -> CalendarEvent:
        response = await self._request("GET", schedule_path(event_id))
        return parse_record(self._json(response))

    async def create_event(self, payload: LessonSchedulePayload) -> CalendarEvent:
        response = await self._request(
            "POST", LESSON_SCHEDULES_PATH, json=payload.model_dump(mode="json")
        )
        created = parse_record(self._json(response))
        logger.info("Created lesson schedule %s", created.id)
        return created

    async def update_event(self, event_id: int, payload: LessonSchedulePayload) -> CalendarEvent:
        response = await self._request(
            "PUT", schedule_path(event_id), json=payload.model_dump(mode="json")
        )
        updated = parse_record(self._json(response))
        logger.info("Updated lesson schedule %s", event_id)
        return updated

    async def delete_event(self, event_id: int) -> None:
        await self._request("DELETE", schedule_path(event_id))
        logger.info("Deleted lesson schedule %s", event_id)
