"""Shared API schemas."""

from libcat.infrastructure.common.schemas.response_wrappers import ApiResponse, ErrorDetails

__all__ = ["ApiResponse", "ErrorDetails"]
