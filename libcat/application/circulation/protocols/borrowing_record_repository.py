from datetime import datetime
from typing import Protocol

from libcat.domain.circulation.entities.borrowing_record import BorrowingRecord
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book


class BorrowingRecordRepositoryProtocol(Protocol):
    def find_outstanding_for_book(self, isbn: Isbn) -> list[BorrowingRecord]: ...

    def find_in_range(
        self, start: datetime, end: datetime
    ) -> list[tuple[BorrowingRecord, Book]]: ...

    def count_grouped_by_book_in_range(
        self, start: datetime, end: datetime
    ) -> list[tuple[str, int]]: ...

    def save(self, record: BorrowingRecord) -> BorrowingRecord: ...
