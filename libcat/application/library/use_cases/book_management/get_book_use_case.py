"""Get book use case."""

from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.exceptions import BookNotFoundError


class GetBookUseCase:
    """Use case for looking up a single book."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def get_book(self, isbn: str) -> Book:
        """
        Get a book by ISBN. Soft-deleted books are still returned.

        Raises:
            BookNotFoundError: If no book has this ISBN
        """
        book = self.book_repository.find_by_isbn(Isbn(isbn))
        if not book:
            raise BookNotFoundError(isbn)
        return book
