"""
Page requests and paged results for catalogue listings.

Listing and search both page over active books:

    books, total = self.book_repository.search(text, pagination)
    return PaginatedResult(items=books, total=total, pagination=pagination)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """A 1-based page number and a page size of at most MAX_PAGE_SIZE."""

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be at least 1")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

    @classmethod
    def from_query(cls, page: int, page_size: int | None, default_page_size: int) -> "Pagination":
        """Build from request parameters, falling back to the configured page size."""
        return cls(page=page, page_size=page_size or default_page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of items plus the total number of matches."""

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.page_size)

    def is_empty(self) -> bool:
        return self.total == 0

    def map(self, convert: Callable[[T], U]) -> "PaginatedResult[U]":
        """Same page with every item converted."""
        return PaginatedResult(
            items=[convert(item) for item in self.items],
            total=self.total,
            pagination=self.pagination,
        )
