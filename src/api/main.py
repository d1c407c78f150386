"""FastAPI development server for the lesson schedule API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.responses import ErrorCodes, ErrorResponse
from api.repository import InMemoryLessonScheduleRepository, sample_records
from api.routes import health_router, lesson_schedules_router
from core.config import API_VERSION, DEV_API_DEBUG, DEV_API_SEED

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info("Serving %d lesson schedules", len(app.state.repository))
    yield


def create_app(repository: InMemoryLessonScheduleRepository | None = None) -> FastAPI:
    """Build the app around a repository (a seeded in-memory one by default)."""
    if repository is None:
        repository = InMemoryLessonScheduleRepository(sample_records() if DEV_API_SEED else None)

    app = FastAPI(
        title="Lesson Schedule Development API",
        description="In-memory /lesson-schedules/ backend for running the lesson calendar locally",
        version=API_VERSION,
        debug=DEV_API_DEBUG,
        lifespan=lifespan,
    )
    app.state.repository = repository

    # CORS middleware (for development)
    if DEV_API_DEBUG:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report body validation failures with the standard error format."""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="Invalid lesson schedule",
                code=ErrorCodes.VALIDATION_ERROR,
                details=[f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()],
            ).model_dump(),
        )

    # Global exception handler for unexpected errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with standard error format."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                code=ErrorCodes.INTERNAL_ERROR,
                details=[],
            ).model_dump(),
        )

    app.include_router(health_router)
    app.include_router(lesson_schedules_router)
    return app


app = create_app()


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import DEV_API_HOST, DEV_API_PORT, LOG_FORMAT, LOG_LEVEL

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    uvicorn.run(
        "api.main:app",
        host=DEV_API_HOST,
        port=DEV_API_PORT,
        reload=DEV_API_DEBUG,
    )
