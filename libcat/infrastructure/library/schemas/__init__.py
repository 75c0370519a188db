"""Library context schemas."""

from libcat.infrastructure.library.schemas.book_schemas import (
    Book,
    BookBase,
    BookCreate,
    BookPage,
    BookUpdate,
    BulkUploadResult,
    BulkUploadRowError,
)

__all__ = [
    "Book",
    "BookBase",
    "BookCreate",
    "BookPage",
    "BookUpdate",
    "BulkUploadResult",
    "BulkUploadRowError",
]
