"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from libcat.constants import ErrorCode

T = TypeVar("T")


class ErrorDetails(BaseModel):
    """Failure code plus human readable details."""

    code: ErrorCode
    details: str


class ApiResponse(BaseModel, Generic[T]):
    """Envelope for every API response, successful or not."""

    success: bool
    message: str
    data: T | None = None
    error: ErrorDetails | None = None

    @classmethod
    def ok(cls, data: T | None, message: str) -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, code: ErrorCode, details: str) -> "ApiResponse[T]":
        return cls(success=False, message=message, error=ErrorDetails(code=code, details=details))
