"""Bulk import books use case."""

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog
from pydantic import ValidationError as PydanticValidationError

from libcat.application.library.use_cases.book_management.create_book_use_case import (
    CreateBookUseCase,
)
from libcat.domain.common.exceptions import DomainError
from libcat.exceptions import InvalidOperationError
from libcat.infrastructure.library.schemas import BookCreate

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BookRow:
    """One data row of an import file. Every field is the raw cell text."""

    isbn: str
    title: str
    author: str
    publication_year: str
    copies: str


@dataclass(frozen=True)
class RowError:
    """A row that could not be imported."""

    row: int
    isbn: str | None
    error: str


@dataclass
class BulkImportResult:
    """Outcome of a bulk import."""

    imported: int = 0
    errors: list[RowError] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.errors)


def _describe_validation_error(error: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )


class BulkImportBooksUseCase:
    """Use case for creating many books from parsed import rows."""

    def __init__(self, create_book_use_case: CreateBookUseCase) -> None:
        self.create_book_use_case = create_book_use_case

    def import_books(self, rows: Iterable[BookRow]) -> BulkImportResult:
        """
        Create one book per row, each in its own transaction.

        Rows that fail coercion, validation or the duplicate ISBN check are
        collected and the import carries on with the next row. Store
        failures propagate and stop the import; rows committed before that
        stay committed.

        Args:
            rows: Parsed rows, numbered from 1 in iteration order

        Returns:
            BulkImportResult with the imported count and per-row failures
        """
        result = BulkImportResult()

        for row_number, row in enumerate(rows, start=1):
            isbn = row.isbn.strip() or None
            try:
                book_data = BookCreate.model_validate(
                    {
                        "isbn": row.isbn,
                        "title": row.title,
                        "author": row.author,
                        "publication_year": row.publication_year,
                        "copies_in_stock": row.copies,
                    }
                )
                self.create_book_use_case.create_book(book_data)
            except PydanticValidationError as e:
                result.errors.append(
                    RowError(row=row_number, isbn=isbn, error=_describe_validation_error(e))
                )
            except (InvalidOperationError, DomainError) as e:
                result.errors.append(RowError(row=row_number, isbn=isbn, error=str(e)))
            else:
                result.imported += 1

        logger.info("bulk_import_finished", imported=result.imported, failed=result.failed)
        return result
