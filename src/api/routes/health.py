"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.dependencies import get_repository
from api.models.responses import HealthResponse
from api.repository import InMemoryLessonScheduleRepository
from core.config import API_VERSION

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(repository: InMemoryLessonScheduleRepository = Depends(get_repository)):
    """Health check endpoint for monitoring. No authentication required."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        schedule_count=len(repository),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
