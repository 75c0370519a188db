from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from libcat.application.circulation.use_cases.borrow_book_use_case import BorrowBookUseCase
from libcat.application.circulation.use_cases.return_book_use_case import ReturnBookUseCase
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
from libcat.application.reporting.use_cases.generate_borrowing_report_use_case import (
    GenerateBorrowingReportUseCase,
)
from libcat.infrastructure.circulation.repositories import BorrowingRecordRepository
from libcat.infrastructure.common.unit_of_work import SqlAlchemyUnitOfWork
from libcat.infrastructure.library.repositories import BookRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Provided per request with the request's session
    db = providers.Dependency(instance_of=Session)

    # Repositories
    book_repository = providers.Factory(BookRepository, db=db)
    borrowing_record_repository = providers.Factory(BorrowingRecordRepository, db=db)

    unit_of_work = providers.Factory(SqlAlchemyUnitOfWork, db=db)

    # Library module, application use cases
    create_book_use_case = providers.Factory(
        CreateBookUseCase,
        book_repository=book_repository,
        unit_of_work=unit_of_work,
    )
    update_book_use_case = providers.Factory(
        UpdateBookUseCase,
        book_repository=book_repository,
        unit_of_work=unit_of_work,
    )
    delete_book_use_case = providers.Factory(
        DeleteBookUseCase,
        book_repository=book_repository,
        borrowing_record_repository=borrowing_record_repository,
        unit_of_work=unit_of_work,
    )
    restore_book_use_case = providers.Factory(
        RestoreBookUseCase,
        book_repository=book_repository,
        unit_of_work=unit_of_work,
    )
    get_book_use_case = providers.Factory(GetBookUseCase, book_repository=book_repository)
    list_books_use_case = providers.Factory(ListBooksUseCase, book_repository=book_repository)
    search_books_use_case = providers.Factory(
        SearchBooksUseCase, book_repository=book_repository
    )
    bulk_import_books_use_case = providers.Factory(
        BulkImportBooksUseCase,
        create_book_use_case=create_book_use_case,
    )

    # Circulation module, application use cases
    borrow_book_use_case = providers.Factory(
        BorrowBookUseCase,
        book_repository=book_repository,
        borrowing_record_repository=borrowing_record_repository,
        unit_of_work=unit_of_work,
    )
    return_book_use_case = providers.Factory(
        ReturnBookUseCase,
        book_repository=book_repository,
        borrowing_record_repository=borrowing_record_repository,
        unit_of_work=unit_of_work,
    )

    # Reporting module, application use cases
    generate_borrowing_report_use_case = providers.Factory(
        GenerateBorrowingReportUseCase,
        borrowing_record_repository=borrowing_record_repository,
    )
