from typing import Protocol

from libcat.application.common.pagination import Pagination
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book


class BookRepositoryProtocol(Protocol):
    def find_by_isbn(self, isbn: Isbn, *, for_update: bool = False) -> Book | None: ...

    def find_active_by_isbn(self, isbn: Isbn, *, for_update: bool = False) -> Book | None: ...

    def save(self, book: Book) -> Book: ...

    def add(self, book: Book) -> Book: ...

    def list_active(self, pagination: Pagination) -> tuple[list[Book], int]: ...

    def search(self, text: str, pagination: Pagination) -> tuple[list[Book], int]: ...
