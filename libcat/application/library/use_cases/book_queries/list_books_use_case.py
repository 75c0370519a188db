"""List books use case."""

from libcat.application.common.pagination import PaginatedResult, Pagination
from libcat.application.library.protocols.book_repository import BookRepositoryProtocol
from libcat.domain.library.entities.book import Book


class ListBooksUseCase:
    """Use case for paging through the active catalogue."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def list_books(self, pagination: Pagination) -> PaginatedResult[Book]:
        books, total = self.book_repository.list_active(pagination)
        return PaginatedResult(items=books, total=total, pagination=pagination)
