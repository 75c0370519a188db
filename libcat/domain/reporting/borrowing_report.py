"""
Borrowing report read model.

Dataclasses describing the per-book borrowing counts and the event list
of a reporting window.
"""

from dataclasses import dataclass, field
from datetime import datetime

from libcat.domain.circulation.entities.borrowing_record import BorrowingRecord
from libcat.domain.library.entities.book import Book


@dataclass(frozen=True)
class BorrowingEvent:
    """One borrowing inside the reporting window."""

    isbn: str
    title: str
    borrowed_at: datetime
    returned_at: datetime | None

    @classmethod
    def from_record(cls, record: BorrowingRecord, book: Book) -> "BorrowingEvent":
        return cls(
            isbn=record.isbn.value,
            title=book.title,
            borrowed_at=record.borrowed_at,
            returned_at=record.returned_at,
        )


@dataclass
class BorrowingReport:
    """Borrowing counts by ISBN plus the events, ordered by borrowed_at then record id."""

    counts_by_isbn: dict[str, int] = field(default_factory=dict)
    events: list[BorrowingEvent] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.events
