"""Create book use case."""

import structlog

from libcat.application.common.unit_of_work import UnitOfWork
from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.exceptions import BookAlreadyExistsError
from libcat.infrastructure.library.schemas import BookCreate

logger = structlog.get_logger(__name__)


class CreateBookUseCase:
    """Use case for cataloguing new books."""

    def __init__(self, book_repository: BookRepositoryProtocol, unit_of_work: UnitOfWork) -> None:
        self.book_repository = book_repository
        self.unit_of_work = unit_of_work

    def create_book(self, book_data: BookCreate) -> Book:
        """
        Create a new active book.

        Args:
            book_data: Validated book creation data

        Returns:
            The created book

        Raises:
            BookAlreadyExistsError: If a book with the same ISBN exists, deleted or not
        """
        isbn = Isbn(book_data.isbn)

        with self.unit_of_work:
            if self.book_repository.find_by_isbn(isbn) is not None:
                raise BookAlreadyExistsError(isbn.value)

            book = Book.create(
                isbn=isbn,
                title=book_data.title,
                author=book_data.author,
                publication_year=book_data.publication_year,
                copies_in_stock=book_data.copies_in_stock,
            )
            book = self.book_repository.add(book)
            self.unit_of_work.commit()

        logger.info("book_created", isbn=isbn.value, copies_in_stock=book.copies_in_stock)
        return book
