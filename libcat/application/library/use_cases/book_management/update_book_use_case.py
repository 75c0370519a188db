"""Update book use case."""

import structlog

from libcat.application.common.unit_of_work import UnitOfWork
from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.exceptions import BookNotFoundError
from libcat.infrastructure.library.schemas import BookUpdate

logger = structlog.get_logger(__name__)


class UpdateBookUseCase:
    """Use case for updating book details."""

    def __init__(self, book_repository: BookRepositoryProtocol, unit_of_work: UnitOfWork) -> None:
        self.book_repository = book_repository
        self.unit_of_work = unit_of_work

    def update_book(self, isbn: str, book_data: BookUpdate) -> Book:
        """
        Replace the title, author, publication year and copy count of a book.

        Soft-deleted books can be updated too; the ISBN itself is immutable.

        Raises:
            BookNotFoundError: If no book has this ISBN
        """
        isbn_vo = Isbn(isbn)

        with self.unit_of_work:
            book = self.book_repository.find_by_isbn(isbn_vo, for_update=True)
            if not book:
                raise BookNotFoundError(isbn)

            book.update_details(
                title=book_data.title,
                author=book_data.author,
                publication_year=book_data.publication_year,
                copies_in_stock=book_data.copies_in_stock,
            )
            book = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info("book_updated", isbn=isbn)
        return book
