"""Infrastructure layer repositories for circulation bounded context."""

from libcat.infrastructure.circulation.repositories.borrowing_record_repository import (
    BorrowingRecordRepository,
)

__all__ = ["BorrowingRecordRepository"]
