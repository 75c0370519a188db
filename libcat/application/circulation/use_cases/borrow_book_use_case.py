"""Borrow book use case."""

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


class BorrowBookUseCase:
    """Use case for checking a copy of a book out."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        borrowing_record_repository: BorrowingRecordRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.borrowing_record_repository = borrowing_record_repository
        self.unit_of_work = unit_of_work

    def borrow_book(self, isbn: str) -> BorrowingRecord:
        """
        Borrow one copy of an active book.

        The stock decrement and the new borrowing record are committed together.

        Args:
            isbn: ISBN of the book to borrow

        Returns:
            The new outstanding borrowing record

        Raises:
            BookNotFoundError: If the book does not exist or is soft-deleted
            InvalidOperationError: If no copies are in stock
        """
        isbn_vo = Isbn(isbn)

        with self.unit_of_work:
            book = self.book_repository.find_active_by_isbn(isbn_vo, for_update=True)
            if not book:
                raise BookNotFoundError(isbn)
            if not book.has_copies_available():
                raise InvalidOperationError("No copies available for borrowing")

            book.check_out_copy()
            self.book_repository.save(book)
            record = self.borrowing_record_repository.save(BorrowingRecord.open(isbn_vo))
            self.unit_of_work.commit()

        logger.info(
            "book_borrowed",
            isbn=isbn,
            record_id=record.id.value,
            copies_in_stock=book.copies_in_stock,
        )
        return record
