from fastapi import APIRouter, Depends
from starlette import status

from libcat.application.circulation.use_cases.borrow_book_use_case import BorrowBookUseCase
from libcat.application.circulation.use_cases.return_book_use_case import ReturnBookUseCase
from libcat.constants import ResponseMessages
from libcat.infrastructure.circulation.schemas import BorrowingRecord
from libcat.infrastructure.common.di import inject_use_case
from libcat.infrastructure.common.schemas import ApiResponse

router = APIRouter(prefix="/books", tags=["circulation"])


@router.post(
    "/{isbn}/borrow", response_model=ApiResponse[BorrowingRecord], status_code=status.HTTP_200_OK
)
def borrow_book(
    isbn: str,
    use_case: BorrowBookUseCase = Depends(inject_use_case("borrow_book_use_case")),
) -> ApiResponse[BorrowingRecord]:
    """
    Borrow one copy of a book.

    Raises:
        BookNotFoundError: If the book does not exist or is soft-deleted
        InvalidOperationError: If no copies are in stock
    """
    record = use_case.borrow_book(isbn)
    return ApiResponse.ok(BorrowingRecord.from_entity(record), ResponseMessages.BOOK_BORROWED)


@router.post(
    "/{isbn}/return", response_model=ApiResponse[BorrowingRecord], status_code=status.HTTP_200_OK
)
def return_book(
    isbn: str,
    use_case: ReturnBookUseCase = Depends(inject_use_case("return_book_use_case")),
) -> ApiResponse[BorrowingRecord]:
    """
    Return the longest outstanding copy of a book.

    Raises:
        BookNotFoundError: If no book has this ISBN
        InvalidOperationError: If nothing is borrowed for this book
    """
    record = use_case.return_book(isbn)
    return ApiResponse.ok(BorrowingRecord.from_entity(record), ResponseMessages.BOOK_RETURNED)
