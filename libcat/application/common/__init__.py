"""
Application common module.

Contains base classes for the application layer:
- Pagination / PaginatedResult: paged list queries
- UnitOfWork: transaction boundary for write use cases
"""

from .pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination
from .unit_of_work import UnitOfWork

__all__ = [
    "MAX_PAGE_SIZE",
    "PaginatedResult",
    "Pagination",
    "UnitOfWork",
]
