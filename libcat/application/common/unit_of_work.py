"""
Transaction boundary for write use cases.

Borrowing, returning and deleting each touch a book and its borrowing
records; a unit of work makes those writes land together or not at all:

    with self.unit_of_work:
        book = self.book_repository.find_active_by_isbn(isbn, for_update=True)
        book.check_out_copy()
        self.book_repository.save(book)
        record = self.borrowing_record_repository.save(BorrowingRecord.open(isbn))
        self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Port implemented by the persistence layer (SqlAlchemyUnitOfWork).

    Nothing is committed implicitly: a block that exits without calling
    commit() leaves its writes to be discarded with the session, and a block
    that raises is rolled back.
    """

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
