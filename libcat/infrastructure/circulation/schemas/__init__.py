"""Circulation context schemas."""

from libcat.infrastructure.circulation.schemas.borrowing_record_schemas import BorrowingRecord

__all__ = ["BorrowingRecord"]
