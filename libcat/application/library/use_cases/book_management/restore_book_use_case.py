"""Restore book use case."""

import structlog

from libcat.application.common.unit_of_work import UnitOfWork
from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.exceptions import BookNotFoundError, InvalidOperationError

logger = structlog.get_logger(__name__)


class RestoreBookUseCase:
    """Use case for restoring soft-deleted books."""

    def __init__(self, book_repository: BookRepositoryProtocol, unit_of_work: UnitOfWork) -> None:
        self.book_repository = book_repository
        self.unit_of_work = unit_of_work

    def restore_book(self, isbn: str) -> Book:
        """
        Bring a soft-deleted book back into the active catalogue.

        Raises:
            BookNotFoundError: If no book has this ISBN
            InvalidOperationError: If the book is not deleted
        """
        isbn_vo = Isbn(isbn)

        with self.unit_of_work:
            book = self.book_repository.find_by_isbn(isbn_vo, for_update=True)
            if not book:
                raise BookNotFoundError(isbn)
            if not book.is_deleted():
                raise InvalidOperationError("Book is not deleted")

            book.restore()
            book = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info("book_restored", isbn=isbn)
        return book
