"""Delete book use case."""

import structlog

from libcat.application.circulation.protocols.borrowing_record_repository import (
    BorrowingRecordRepositoryProtocol,
)
from libcat.application.common.unit_of_work import UnitOfWork
from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.exceptions import BookNotFoundError, InvalidOperationError

logger = structlog.get_logger(__name__)


class DeleteBookUseCase:
    """Use case for soft deleting books."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        borrowing_record_repository: BorrowingRecordRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.book_repository = book_repository
        self.borrowing_record_repository = borrowing_record_repository
        self.unit_of_work = unit_of_work

    def delete_book(self, isbn: str) -> Book:
        """
        Soft delete a book that nobody is currently borrowing.

        The outstanding-borrowing check and the status change happen in the
        same transaction, with the book row locked, so a concurrent borrow
        cannot slip in between them.

        Args:
            isbn: ISBN of the book to delete

        Returns:
            The soft-deleted book

        Raises:
            BookNotFoundError: If the book does not exist or is already deleted
            InvalidOperationError: If the book has outstanding borrowings
        """
        isbn_vo = Isbn(isbn)

        with self.unit_of_work:
            book = self.book_repository.find_active_by_isbn(isbn_vo, for_update=True)
            if not book:
                raise BookNotFoundError(isbn)

            outstanding = self.borrowing_record_repository.find_outstanding_for_book(isbn_vo)
            if outstanding:
                raise InvalidOperationError(
                    "Cannot delete book as it is currently borrowed. "
                    f"Active borrowings: {len(outstanding)}"
                )

            book.soft_delete()
            book = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info("book_deleted", isbn=isbn)
        return book
