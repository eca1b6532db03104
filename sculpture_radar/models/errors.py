"""Error taxonomy for Sculpture Radar.

Every failure that can reach the presentation boundary is one of the
``RadarError`` subclasses below. Each carries a stable ``ErrorCode`` and a
user-facing message; the backend's own error text is only ever logged.

Rejected candidate records ("validation dropped") are not errors in this
sense: they are filtered out and logged inside the AI gateway.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error codes surfaced to API clients."""

    LOCATION_NOT_FOUND = "LOCATION_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    TRANSIENT_ERROR = "TRANSIENT_ERROR"
    API_ERROR = "API_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SEARCH_SUPERSEDED = "SEARCH_SUPERSEDED"


class AppError(BaseModel):
    """Presentation-safe error payload."""

    code: ErrorCode = Field(..., description="Stable machine-readable code")
    message: str = Field(..., description="Internal summary for logs and debugging")
    user_message: str = Field(..., description="Message safe to show to end users")


class RadarError(Exception):
    """Base class for all classified failures."""

    code: ErrorCode = ErrorCode.API_ERROR
    user_message: str = "Something went wrong. Please try again."

    def __init__(self, message: str = "", *, user_message: str | None = None) -> None:
        super().__init__(message or self.__class__.__name__)
        if user_message is not None:
            self.user_message = user_message

    @property
    def message(self) -> str:
        return str(self.args[0])

    def to_app_error(self) -> AppError:
        return AppError(code=self.code, message=self.message, user_message=self.user_message)


class NotFoundError(RadarError):
    """The query could not be resolved to coordinates."""

    code = ErrorCode.LOCATION_NOT_FOUND
    user_message = "Location not found. Try a different place name."


class ConfigurationError(RadarError):
    """Missing or rejected credentials for the AI backend."""

    code = ErrorCode.CONFIGURATION_ERROR
    user_message = "The AI service is not configured. Set an API key and try again."


class QuotaExceededError(RadarError):
    """The AI backend reported a rate limit or exhausted quota."""

    code = ErrorCode.QUOTA_EXCEEDED
    user_message = (
        "The AI service has reached its limit. Showing results from our own collection."
    )


class TransientError(RadarError):
    """Network failure, timeout, 5xx or unusable response. Retried."""

    code = ErrorCode.TRANSIENT_ERROR
    user_message = "The AI service is temporarily unavailable. Please try again."


class MalformedResponseError(TransientError):
    """The backend answered, but not with the JSON we asked for."""


class UpstreamError(RadarError):
    """The backend rejected the request; retrying will not help."""

    code = ErrorCode.API_ERROR
