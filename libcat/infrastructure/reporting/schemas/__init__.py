"""Reporting context schemas."""

from libcat.infrastructure.reporting.schemas.report_schemas import BorrowingEvent, BorrowingReport

__all__ = ["BorrowingEvent", "BorrowingReport"]
