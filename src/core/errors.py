"""
Error types raised by the lesson calendar.

Remote-call failures are converted to these at the client boundary so callers
never see raw httpx or pydantic exceptions.
"""


class LessonCalendarError(Exception):
    """Base class for all lesson calendar errors."""


class DraftValidationError(LessonCalendarError):
    """Raised when an edit-session draft cannot be submitted."""

    REQUIRED_FIELDS = "REQUIRED_FIELDS"
    INVALID_DATETIME = "INVALID_DATETIME"
    END_BEFORE_START = "END_BEFORE_START"

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class ApiTransportError(LessonCalendarError):
    """Timeout or connection failure talking to the lesson schedule API."""


class ApiResponseError(LessonCalendarError):
    """The API answered with an error status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class AuthenticationError(ApiResponseError):
    """401 from the API: the bearer credential is missing, expired or invalid."""


class NotFoundError(ApiResponseError):
    """404 from the API: the requested schedule does not exist."""


class RecordDecodingError(LessonCalendarError):
    """A wire record did not match the expected lesson schedule shape."""
