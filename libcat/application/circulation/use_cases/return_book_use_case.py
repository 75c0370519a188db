"""Return book use case."""

import structlog

from libcat.application.circulation.protocols.borrowing_record_repository import (
    BorrowingRecordRepositoryProtocol,
)
from libcat.application.common.unit_of_work import UnitOfWork
from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.circulation.entities.borrowing_record import BorrowingRecord
from libcat.domain.common.value_objects.ids import Isbn
from libcat.exceptions import BookNotFoundError, InvalidOperationError

logger = structlog.get_logger(__name__)


class ReturnBookUseCase:
    """Use case for checking a borrowed copy back in."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        borrowing_record_repository: BorrowingRecordRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.borrowing_record_repository = borrowing_record_repository
        self.unit_of_work = unit_of_work

    def return_book(self, isbn: str) -> BorrowingRecord:
        """
        Return one borrowed copy of a book.

        The oldest outstanding record is closed first. Returns are accepted
        for soft-deleted books as well.

        Raises:
            BookNotFoundError: If no book has this ISBN
            InvalidOperationError: If the book has no outstanding borrowing
        """
        isbn_vo = Isbn(isbn)

        with self.unit_of_work:
            book = self.book_repository.find_by_isbn(isbn_vo, for_update=True)
            if not book:
                raise BookNotFoundError(isbn)

            outstanding = self.borrowing_record_repository.find_outstanding_for_book(isbn_vo)
            if not outstanding:
                raise InvalidOperationError("No active borrowing record found for this book")

            record = outstanding[0]
            record.mark_returned()
            book.check_in_copy()
            self.book_repository.save(book)
            record = self.borrowing_record_repository.save(record)
            self.unit_of_work.commit()

        logger.info(
            "book_returned",
            isbn=isbn,
            record_id=record.id.value,
            copies_in_stock=book.copies_in_stock,
        )
        return record
