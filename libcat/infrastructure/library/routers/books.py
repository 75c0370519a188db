import io
from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, UploadFile
from starlette import status

from libcat.application.common.pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination
from libcat.application.library.use_cases.book_import.bulk_import_books_use_case import (
    BulkImportBooksUseCase,
)
from libcat.application.library.use_cases.book_management.create_book_use_case import (
    CreateBookUseCase,
)
from libcat.application.library.use_cases.book_management.delete_book_use_case import (
    DeleteBookUseCase,
)
from libcat.application.library.use_cases.book_management.get_book_use_case import (
    GetBookUseCase,
)
from libcat.application.library.use_cases.book_management.restore_book_use_case import (
    RestoreBookUseCase,
)
from libcat.application.library.use_cases.book_management.update_book_use_case import (
    UpdateBookUseCase,
)
from libcat.application.library.use_cases.book_queries.list_books_use_case import (
    ListBooksUseCase,
)
from libcat.application.library.use_cases.book_queries.search_books_use_case import (
    SearchBooksUseCase,
)
from libcat.config import Settings, get_settings
from libcat.constants import ResponseMessages
from libcat.domain.library.entities.book import Book as BookEntity
from libcat.exceptions import ValidationError
from libcat.infrastructure.common.di import inject_use_case
from libcat.infrastructure.common.schemas import ApiResponse
from libcat.infrastructure.library.schemas import (
    Book,
    BookCreate,
    BookPage,
    BookUpdate,
    BulkUploadResult,
    BulkUploadRowError,
)
from libcat.infrastructure.library.services.csv_row_reader import read_book_rows

router = APIRouter(prefix="/books", tags=["books"])


def _to_page(result: PaginatedResult[BookEntity]) -> BookPage:
    page = result.map(Book.from_entity)
    return BookPage(
        items=page.items,
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("", response_model=ApiResponse[BookPage], status_code=status.HTTP_200_OK)
def list_books(
    settings: Annotated[Settings, Depends(get_settings)],
    use_case: ListBooksUseCase = Depends(inject_use_case("list_books_use_case")),
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int | None = Query(None, ge=1, le=MAX_PAGE_SIZE, description="Books per page"),
) -> ApiResponse[BookPage]:
    """
    Get a page of active books sorted by title.

    Soft-deleted books are left out.
    """
    pagination = Pagination.from_query(page, page_size, settings.DEFAULT_PAGE_SIZE)
    result = use_case.list_books(pagination)
    return ApiResponse.ok(_to_page(result), ResponseMessages.BOOKS_RETRIEVED)


@router.get("/search", response_model=ApiResponse[BookPage], status_code=status.HTTP_200_OK)
def search_books(
    settings: Annotated[Settings, Depends(get_settings)],
    use_case: SearchBooksUseCase = Depends(inject_use_case("search_books_use_case")),
    query: str | None = Query(None, description="Text to look for in title or author"),
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int | None = Query(None, ge=1, le=MAX_PAGE_SIZE, description="Books per page"),
) -> ApiResponse[BookPage]:
    """
    Search active books by title or author, case-insensitively.

    An empty result is still a success.

    Raises:
        InvalidOperationError: If the query is missing or blank
    """
    pagination = Pagination.from_query(page, page_size, settings.DEFAULT_PAGE_SIZE)
    result = use_case.search_books(query, pagination)
    message = (
        ResponseMessages.NO_SEARCH_RESULTS
        if result.is_empty()
        else ResponseMessages.BOOKS_RETRIEVED
    )
    return ApiResponse.ok(_to_page(result), message)


@router.post(
    "/bulk-upload", response_model=ApiResponse[BulkUploadResult], status_code=status.HTTP_200_OK
)
def bulk_upload_books(
    file: Annotated[UploadFile, File(..., description="CSV file with a header row")],
    settings: Annotated[Settings, Depends(get_settings)],
    use_case: BulkImportBooksUseCase = Depends(inject_use_case("bulk_import_books_use_case")),
) -> ApiResponse[BulkUploadResult]:
    """
    Create books from an uploaded CSV file.

    The header must name the columns ISBN, title, author, publication_year
    and copies. Bad rows are reported back and do not stop the import.

    Raises:
        ValidationError: If the file is too large, not UTF-8 or lacks a column
    """
    content = file.file.read(settings.BULK_UPLOAD_MAX_BYTES + 1)
    if len(content) > settings.BULK_UPLOAD_MAX_BYTES:
        raise ValidationError(f"File too large (max {settings.BULK_UPLOAD_MAX_BYTES} bytes)")

    result = use_case.import_books(read_book_rows(io.BytesIO(content)))

    payload = BulkUploadResult(
        imported=result.imported,
        failed=result.failed,
        errors=[
            BulkUploadRowError(row=error.row, isbn=error.isbn, error=error.error)
            for error in result.errors
        ],
    )
    message = (
        ResponseMessages.BOOKS_PARTIALLY_UPLOADED
        if result.failed
        else ResponseMessages.BOOKS_UPLOADED
    )
    return ApiResponse.ok(payload, message)


@router.post("", response_model=ApiResponse[Book], status_code=status.HTTP_201_CREATED)
def create_book(
    book_data: BookCreate,
    use_case: CreateBookUseCase = Depends(inject_use_case("create_book_use_case")),
) -> ApiResponse[Book]:
    """
    Catalogue a new book.

    Raises:
        BookAlreadyExistsError: If the ISBN is taken, even by a deleted book
    """
    book = use_case.create_book(book_data)
    return ApiResponse.ok(Book.from_entity(book), ResponseMessages.BOOK_CREATED)


@router.get("/{isbn}", response_model=ApiResponse[Book], status_code=status.HTTP_200_OK)
def get_book(
    isbn: str,
    use_case: GetBookUseCase = Depends(inject_use_case("get_book_use_case")),
) -> ApiResponse[Book]:
    """Get a book by ISBN, soft-deleted books included."""
    book = use_case.get_book(isbn)
    return ApiResponse.ok(Book.from_entity(book), ResponseMessages.BOOK_RETRIEVED)


@router.put("/{isbn}", response_model=ApiResponse[Book], status_code=status.HTTP_200_OK)
def update_book(
    isbn: str,
    book_data: BookUpdate,
    use_case: UpdateBookUseCase = Depends(inject_use_case("update_book_use_case")),
) -> ApiResponse[Book]:
    """
    Replace the details of a book. The ISBN cannot be changed.

    Raises:
        BookNotFoundError: If no book has this ISBN
    """
    book = use_case.update_book(isbn, book_data)
    return ApiResponse.ok(Book.from_entity(book), ResponseMessages.BOOK_UPDATED)


@router.delete("/{isbn}", response_model=ApiResponse[Book], status_code=status.HTTP_200_OK)
def delete_book(
    isbn: str,
    use_case: DeleteBookUseCase = Depends(inject_use_case("delete_book_use_case")),
) -> ApiResponse[Book]:
    """
    Soft delete a book.

    Raises:
        BookNotFoundError: If the book does not exist or is already deleted
        InvalidOperationError: If copies of the book are still borrowed
    """
    book = use_case.delete_book(isbn)
    return ApiResponse.ok(Book.from_entity(book), ResponseMessages.BOOK_DELETED)


@router.post("/{isbn}/restore", response_model=ApiResponse[Book], status_code=status.HTTP_200_OK)
def restore_book(
    isbn: str,
    use_case: RestoreBookUseCase = Depends(inject_use_case("restore_book_use_case")),
) -> ApiResponse[Book]:
    """
    Restore a soft-deleted book.

    Raises:
        BookNotFoundError: If no book has this ISBN
        InvalidOperationError: If the book is not deleted
    """
    book = use_case.restore_book(isbn)
    return ApiResponse.ok(Book.from_entity(book), ResponseMessages.BOOK_RESTORED)
