from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from libcat.application.common.pagination import Pagination
from libcat.domain.common.value_objects.ids import Isbn
from libcat.domain.library.entities.book import Book
from libcat.infrastructure.library.mappers.book_mapper import BookMapper
from libcat.models import Book as BookORM


class BookRepository:
    """Domain-centric repository for Book persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def find_by_isbn(self, isbn: Isbn, *, for_update: bool = False) -> Book | None:
        """
        Find a book by ISBN, soft-deleted books included.

        With ``for_update`` the row stays locked until the surrounding
        transaction ends (ignored by dialects without row locks).
        """
        stmt = select(BookORM).where(BookORM.isbn == isbn.value)
        if for_update:
            stmt = stmt.with_for_update()
        orm_model = self.db.execute(stmt).scalar_one_or_none()

        if not orm_model:
            return None

        return self.mapper.to_domain(orm_model)

    def find_active_by_isbn(self, isbn: Isbn, *, for_update: bool = False) -> Book | None:
        """Find a book by ISBN, ignoring soft-deleted books."""
        stmt = (
            select(BookORM)
            .where(BookORM.isbn == isbn.value)
            .where(BookORM.deleted_at.is_(None))
        )
        if for_update:
            stmt = stmt.with_for_update()
        orm_model = self.db.execute(stmt).scalar_one_or_none()

        if not orm_model:
            return None

        return self.mapper.to_domain(orm_model)

    def add(self, book: Book) -> Book:
        """Insert a new book."""
        orm_model = self.mapper.to_orm(book)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def save(self, book: Book) -> Book:
        """Persist changes to an existing book."""
        stmt = select(BookORM).where(BookORM.isbn == book.id.value)
        existing_orm = self.db.execute(stmt).scalar_one()
        self.mapper.to_orm(book, existing_orm)
        self.db.flush()
        return self.mapper.to_domain(existing_orm)

    def list_active(self, pagination: Pagination) -> tuple[list[Book], int]:
        """
        Get a page of active books sorted by title.

        Returns:
            tuple[list[Book], int]: (books on the page, total number of active books)
        """
        return self._paginate(select(BookORM).where(BookORM.deleted_at.is_(None)), pagination)

    def search(self, text: str, pagination: Pagination) -> tuple[list[Book], int]:
        """
        Case-insensitive substring search on title or author across active books.

        Returns:
            tuple[list[Book], int]: (matching books on the page, total number of matches)
        """
        # autoescape keeps % and _ in the query literal
        stmt = select(BookORM).where(
            BookORM.deleted_at.is_(None),
            BookORM.title.icontains(text, autoescape=True)
            | BookORM.author.icontains(text, autoescape=True),
        )
        return self._paginate(stmt, pagination)

    def _paginate(
        self, stmt: Select[tuple[BookORM]], pagination: Pagination
    ) -> tuple[list[Book], int]:
        total_stmt = select(func.count()).select_from(stmt.subquery())
        total = self.db.execute(total_stmt).scalar() or 0

        page_stmt = (
            stmt.order_by(BookORM.title, BookORM.isbn)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(page_stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total
