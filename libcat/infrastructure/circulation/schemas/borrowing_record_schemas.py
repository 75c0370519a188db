"""Pydantic schemas for borrowing record responses."""

from datetime import datetime

from pydantic import BaseModel

from libcat.domain.circulation.entities.borrowing_record import (
    BorrowingRecord as BorrowingRecordEntity,
)


class BorrowingRecord(BaseModel):
    """Schema for BorrowingRecord response."""

    id: int
    isbn: str
    borrowed_at: datetime
    returned_at: datetime | None = None

    @classmethod
    def from_entity(cls, record: BorrowingRecordEntity) -> "BorrowingRecord":
        return cls(
            id=record.id.value,
            isbn=record.isbn.value,
            borrowed_at=record.borrowed_at,
            returned_at=record.returned_at,
        )
