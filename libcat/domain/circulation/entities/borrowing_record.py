from dataclasses import dataclass
from datetime import UTC, datetime

from libcat.domain.common.entity import Entity
from libcat.domain.common.exceptions import InvariantViolationError
from libcat.domain.common.value_objects.ids import BorrowingRecordId, Isbn


@dataclass(eq=False)
class BorrowingRecord(Entity[BorrowingRecordId]):
    """
    One checkout of one copy of a book.

    A record is outstanding until it carries a return timestamp.
    """

    id: BorrowingRecordId
    isbn: Isbn
    borrowed_at: datetime
    returned_at: datetime | None = None

    def is_outstanding(self) -> bool:
        return self.returned_at is None

    def mark_returned(self, when: datetime | None = None) -> None:
        """
        Close this record.

        Raises:
            InvariantViolationError: If the record was already returned
        """
        if not self.is_outstanding():
            raise InvariantViolationError(
                "BorrowingRecord", f"record {self.id} has already been returned"
            )
        returned_at = when or datetime.now(UTC)
        if returned_at < self.borrowed_at:
            raise InvariantViolationError(
                "BorrowingRecord", "returned_at cannot precede borrowed_at"
            )
        self.returned_at = returned_at

    @classmethod
    def open(cls, isbn: Isbn, when: datetime | None = None) -> "BorrowingRecord":
        """Factory for a new outstanding record."""
        return cls(
            id=BorrowingRecordId.generate(),
            isbn=isbn,
            borrowed_at=when or datetime.now(UTC),
            returned_at=None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: BorrowingRecordId,
        isbn: Isbn,
        borrowed_at: datetime,
        returned_at: datetime | None = None,
    ) -> "BorrowingRecord":
        """Factory for reconstituting a record from persistence."""
        return cls(id=id, isbn=isbn, borrowed_at=borrowed_at, returned_at=returned_at)
