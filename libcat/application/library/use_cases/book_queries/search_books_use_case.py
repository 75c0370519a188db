"""Search books use case."""

from libcat.application.common.pagination import PaginatedResult, Pagination
from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.library.entities.book import Book
from libcat.exceptions import InvalidOperationError


class SearchBooksUseCase:
    """Use case for searching active books by title or author."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def search_books(self, query: str | None, pagination: Pagination) -> PaginatedResult[Book]:
        """
        Search active books whose title or author contains ``query``.

        No matches is not an error: the result is simply empty.

        Raises:
            InvalidOperationError: If the query is empty or whitespace only
        """
        text = (query or "").strip()
        if not text:
            raise InvalidOperationError("Search query cannot be empty")

        books, total = self.book_repository.search(text, pagination)
        return PaginatedResult(items=books, total=total, pagination=pagination)
