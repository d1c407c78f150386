"""API route modules."""

from .health import router as health_router
from .lesson_schedules import router as lesson_schedules_router

__all__ = ["health_router", "lesson_schedules_router"]
