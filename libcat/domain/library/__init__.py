"""Library bounded context: the catalogue of books."""

from .entities.book import Active, Book, BookStatus, Deleted

__all__ = ["Active", "Book", "BookStatus", "Deleted"]
