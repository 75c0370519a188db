"""Common value objects shared across all domain modules."""

from .ids import ISBN_MAX_LENGTH, BorrowingRecordId, Isbn

__all__ = [
    "ISBN_MAX_LENGTH",
    "BorrowingRecordId",
    "Isbn",
]
