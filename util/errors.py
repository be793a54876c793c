# util/errors.py
from typing import Optional
from fastapi import HTTPException, status
from util.enums import ErrorMessage


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)
        self.message = message

    @classmethod
    def of(cls, error: ErrorMessage) -> "AppError":
        return cls(error.value.message, error.value.http_status)

    def __str__(self) -> str:
        return self.message


class InvalidInput(AppError):
    """A required parameter is missing or blank."""


class ResourceNotFound(AppError):
    """A local resource (file) could not be opened."""


class ProviderUnavailable(AppError):
    """Transport failure, non-2xx status, or an unconfigured provider."""


class MalformedResponse(AppError):
    """A provider response is unparsable or misses a required field."""


class UnknownState(AppError):
    """A job reported a status outside the recognised set."""

    def __init__(self, raw_status: Optional[str]) -> None:
        super().__init__(f"Unknown transcription status: {raw_status!r}")
        self.raw_status = raw_status


class JobFailed(AppError):
    """The provider moved the job to its terminal failure state."""

    NO_DETAIL = "no error detail reported by the provider"

    def __init__(self, job_id: str, detail: Optional[str]) -> None:
        super().__init__(
            f"Transcription failed: {detail or self.NO_DETAIL}", status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        self.job_id = job_id
        self.error_detail = detail


class JobTimeout(AppError):
    """The polling deadline elapsed before the job reached a terminal status."""

    def __init__(self, job_id: str, timeout: float) -> None:
        super().__init__(
            f"Transcription {job_id} did not finish within {timeout:g}s",
            status.HTTP_504_GATEWAY_TIMEOUT,
        )
        self.job_id = job_id
