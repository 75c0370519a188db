"""Repository for BorrowingRecord domain entities."""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from libcat.domain.circulation.entities.borrowing_record import BorrowingRecord
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.infrastructure.circulation.mappers.borrowing_record_mapper import (
    BorrowingRecordMapper,
)
from libcat.infrastructure.library.mappers.book_mapper import BookMapper
from libcat.models import Book as BookORM
from libcat.models import BorrowingRecord as BorrowingRecordORM


class BorrowingRecordRepository:
    """Repository for BorrowingRecord domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BorrowingRecordMapper()
        self.book_mapper = BookMapper()

    def find_outstanding_for_book(self, isbn: Isbn) -> list[BorrowingRecord]:
        """
        Get the records of a book that have not been returned yet.

        Returns:
            List of records, oldest borrowing first (ties broken by id)
        """
        stmt = (
            select(BorrowingRecordORM)
            .where(
                BorrowingRecordORM.isbn == isbn.value,
                BorrowingRecordORM.returned_at.is_(None),
            )
            .order_by(BorrowingRecordORM.borrowed_at.asc(), BorrowingRecordORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_in_range(self, start: datetime, end: datetime) -> list[tuple[BorrowingRecord, Book]]:
        """
        Get the records borrowed within ``[start, end]`` together with their books.

        Returns:
            List of (record, book) tuples ordered by borrowed_at, then record id
        """
        stmt = (
            select(BorrowingRecordORM, BookORM)
            .join(BookORM, BorrowingRecordORM.isbn == BookORM.isbn)
            .where(BorrowingRecordORM.borrowed_at.between(start, end))
            .order_by(BorrowingRecordORM.borrowed_at.asc(), BorrowingRecordORM.id.asc())
        )
        rows = self.db.execute(stmt).all()
        return [
            (self.mapper.to_domain(record_orm), self.book_mapper.to_domain(book_orm))
            for record_orm, book_orm in rows
        ]

    def count_grouped_by_book_in_range(
        self, start: datetime, end: datetime
    ) -> list[tuple[str, int]]:
        """
        Count the records borrowed within ``[start, end]`` per ISBN.

        Returns:
            List of (isbn, count) tuples ordered by ISBN
        """
        stmt = (
            select(BorrowingRecordORM.isbn, func.count(BorrowingRecordORM.id))
            .where(BorrowingRecordORM.borrowed_at.between(start, end))
            .group_by(BorrowingRecordORM.isbn)
            .order_by(BorrowingRecordORM.isbn)
        )
        return [(isbn, count) for isbn, count in self.db.execute(stmt).all()]

    def save(self, record: BorrowingRecord) -> BorrowingRecord:
        """
        Save a borrowing record (create or update).

        Args:
            record: Record to persist; id 0 means not yet stored

        Returns:
            The stored record with its database id
        """
        if record.id.value == 0:
            orm_model = self.mapper.to_orm(record)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        stmt = select(BorrowingRecordORM).where(BorrowingRecordORM.id == record.id.value)
        existing_orm = self.db.execute(stmt).scalar_one()
        self.mapper.to_orm(record, existing_orm)
        self.db.flush()
        return self.mapper.to_domain(existing_orm)
