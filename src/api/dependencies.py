"""FastAPI dependencies for authentication and shared resources."""

import secrets

from fastapi import Header, HTTPException, Request, status

from api.models.responses import ErrorCodes
from api.repository import InMemoryLessonScheduleRepository
from core.config import DEV_API_TOKEN


async def verify_bearer_token(authorization: str | None = Header(None)) -> str:
    """
    Verify the bearer token from the Authorization header.

    Raises:
        HTTPException: 401 if the header is missing, malformed or the token is wrong
    """
    scheme, _, token = (authorization or "").partition(" ")

    # Use constant-time comparison to prevent timing attacks
    if scheme.lower() != "bearer" or not secrets.compare_digest(token, DEV_API_TOKEN):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Invalid or missing bearer token",
                "code": ErrorCodes.UNAUTHORIZED,
                "details": [],
            },
            headers={"WWW-Authenticate": "Bearer"},
        )

    return token


def get_repository(request: Request) -> InMemoryLessonScheduleRepository:
    """Repository attached to the app at creation time."""
    return request.app.state.repository
