"""Database models."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from libcat.database import Base


class Book(Base):
    """A catalogued title and its copy count."""

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("copies_in_stock >= 0", name="ck_books_copies_in_stock_non_negative"),
        CheckConstraint(
            "publication_year BETWEEN 1000 AND 9999", name="ck_books_publication_year_range"
        ),
    )

    isbn: Mapped[str] = mapped_column(String(20), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    author: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    publication_year: Mapped[int] = mapped_column(Integer, nullable=False)
    copies_in_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # NULL means active; a timestamp means soft-deleted at that moment
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    borrowing_records: Mapped[list["BorrowingRecord"]] = relationship(back_populates="book")

    def __repr__(self) -> str:
        """String representation of Book."""
        return f"<Book(isbn={self.isbn!r}, title='{self.title[:50]}')>"


class BorrowingRecord(Base):
    """One checkout of one copy of a book."""

    __tablename__ = "borrowing_records"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    isbn: Mapped[str] = mapped_column(
        String(20), ForeignKey("books.isbn"), nullable=False, index=True
    )
    borrowed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    returned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    book: Mapped[Book] = relationship(back_populates="borrowing_records")

    def __repr__(self) -> str:
        """String representation of BorrowingRecord."""
        return f"<BorrowingRecord(id={self.id}, isbn={self.isbn!r})>"
