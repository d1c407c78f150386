"""Lesson schedule CRUD endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_repository, verify_bearer_token
from api.models.responses import ErrorCodes
from api.repository import InMemoryLessonScheduleRepository
from models.events import LessonSchedulePayload, LessonScheduleRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lesson-schedules", dependencies=[Depends(verify_bearer_token)])


def schedule_not_found(schedule_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error": "Lesson schedule not found",
            "code": ErrorCodes.NOT_FOUND,
            "details": [f"id={schedule_id}"],
        },
    )


@router.get("/", response_model=list[LessonScheduleRecord])
async def list_schedules(repository: InMemoryLessonScheduleRepository = Depends(get_repository)):
    return repository.list_all()


@router.post("/", response_model=LessonScheduleRecord, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    payload: LessonSchedulePayload,
    repository: InMemoryLessonScheduleRepository = Depends(get_repository),
):
    record = repository.create(payload)
    logger.info("Created lesson schedule %s", record.id)
    return record


@router.get("/{schedule_id}/", response_model=LessonScheduleRecord)
async def get_schedule(
    schedule_id: int,
    repository: InMemoryLessonScheduleRepository = Depends(get_repository),
):
    record = repository.get(schedule_id)
    if record is None:
        raise schedule_not_found(schedule_id)
    return record


@router.put("/{schedule_id}/", response_model=LessonScheduleRecord)
async def replace_schedule(
    schedule_id: int,
    payload: LessonSchedulePayload,
    repository: InMemoryLessonScheduleRepository = Depends(get_repository),
):
    record = repository.update(schedule_id, payload)
    if record is None:
        raise schedule_not_found(schedule_id)
    logger.info("Updated lesson schedule %s", schedule_id)
    return record


@router.delete("/{schedule_id}/", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(
    schedule_id: int,
    repository: InMemoryLessonScheduleRepository = Depends(get_repository),
):
    if not repository.delete(schedule_id):
        raise schedule_not_found(schedule_id)
    logger.info("Deleted lesson schedule %s", schedule_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
