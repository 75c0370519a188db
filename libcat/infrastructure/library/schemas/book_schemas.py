"""Pydantic schemas for Book API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from libcat.domain.common.value_objects.ids import ISBN_MAX_LENGTH
from libcat.domain.library.entities.book import (
    MAX_PUBLICATION_YEAR,
    MIN_PUBLICATION_YEAR,
)
from libcat.domain.library.entities.book import Book as BookEntity


class BookBase(BaseModel):
    """Base schema for Book."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255, description="Book title")
    author: str = Field(..., min_length=1, max_length=255, description="Book author")
    publication_year: int = Field(
        ...,
        ge=MIN_PUBLICATION_YEAR,
        le=MAX_PUBLICATION_YEAR,
        description="Year of publication",
    )
    copies_in_stock: int = Field(..., ge=0, description="Number of copies available to borrow")


class BookCreate(BookBase):
    """Schema for creating a Book."""

    isbn: str = Field(..., min_length=1, max_length=ISBN_MAX_LENGTH, description="Book ISBN")


class BookUpdate(BookBase):
    """Schema for updating a Book. The ISBN comes from the path and never changes."""


class Book(BaseModel):
    """Schema for Book response."""

    isbn: str
    title: str
    author: str
    publication_year: int
    copies_in_stock: int
    deleted: bool
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, book: BookEntity) -> "Book":
        return cls(
            isbn=book.id.value,
            title=book.title,
            author=book.author,
            publication_year=book.publication_year,
            copies_in_stock=book.copies_in_stock,
            deleted=book.is_deleted(),
            deleted_at=book.deleted_at,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )


class BookPage(BaseModel):
    """Schema for a page of books."""

    items: list[Book]
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)


class BulkUploadRowError(BaseModel):
    """A CSV row that could not be imported."""

    row: int = Field(..., ge=1, description="1-based data row number, header excluded")
    isbn: str | None = None
    error: str


class BulkUploadResult(BaseModel):
    """Summary of a bulk upload."""

    imported: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    errors: list[BulkUploadRowError] = Field(default_factory=list)
