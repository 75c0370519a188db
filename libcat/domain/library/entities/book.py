"""
Book entity.

Encapsulates the inventory and lifecycle rules of a catalogued title.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from libcat.domain.common.entity import Entity
from libcat.domain.common.exceptions import InvariantViolationError, ValidationError
from libcat.domain.common.value_object import ValueObject
from libcat.domain.common.value_objects.ids import Isbn

MIN_PUBLICATION_YEAR = 1000
MAX_PUBLICATION_YEAR = 9999


@dataclass(frozen=True, repr=False)
class Active(ValueObject):
    """Book is visible in listings and can be borrowed."""


@dataclass(frozen=True, repr=False)
class Deleted(ValueObject):
    """Book was soft-deleted at the given moment."""

    at: datetime


BookStatus = Active | Deleted


@dataclass(eq=False)
class Book(Entity[Isbn]):
    """
    Book entity.

    Business Rules:
    - Title and author cannot be empty
    - Publication year lies within 1000-9999
    - Copies in stock never go negative
    - Soft deletion only; the deletion timestamp lives inside the status
    """

    # Identity
    id: Isbn

    # Catalogue data
    title: str
    author: str
    publication_year: int

    # Inventory
    copies_in_stock: int

    # Timestamps
    created_at: datetime
    updated_at: datetime

    # Lifecycle
    status: BookStatus = Active()

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._validate_details(
            self.title, self.author, self.publication_year, self.copies_in_stock
        )

    @staticmethod
    def _validate_details(
        title: str, author: str, publication_year: int, copies_in_stock: int
    ) -> None:
        if not title or not title.strip():
            raise ValidationError("Book title cannot be empty", field="title")
        if not author or not author.strip():
            raise ValidationError("Book author cannot be empty", field="author")
        if not MIN_PUBLICATION_YEAR <= publication_year <= MAX_PUBLICATION_YEAR:
            raise ValidationError(
                f"Publication year must be between {MIN_PUBLICATION_YEAR} "
                f"and {MAX_PUBLICATION_YEAR}",
                field="publication_year",
                value=publication_year,
            )
        if copies_in_stock < 0:
            raise ValidationError(
                "Number of copies cannot be negative",
                field="copies_in_stock",
                value=copies_in_stock,
            )

    @property
    def isbn(self) -> Isbn:
        return self.id

    # Query methods

    def is_deleted(self) -> bool:
        """Check if this book has been soft-deleted."""
        return isinstance(self.status, Deleted)

    @property
    def deleted_at(self) -> datetime | None:
        if isinstance(self.status, Deleted):
            return self.status.at
        return None

    def has_copies_available(self) -> bool:
        return self.copies_in_stock > 0

    # Command methods

    def update_details(
        self, title: str, author: str, publication_year: int, copies_in_stock: int
    ) -> None:
        """Replace the mutable catalogue fields. The ISBN never changes."""
        self._validate_details(title, author, publication_year, copies_in_stock)
        self.title = title.strip()
        self.author = author.strip()
        self.publication_year = publication_year
        self.copies_in_stock = copies_in_stock
        self._touch()

    def check_out_copy(self) -> None:
        """
        Take one copy out of stock.

        Raises:
            InvariantViolationError: If no copies are in stock
        """
        if not self.has_copies_available():
            raise InvariantViolationError("Book", "copies_in_stock cannot go negative")
        self.copies_in_stock -= 1
        self._touch()

    def check_in_copy(self) -> None:
        """Put one copy back in stock."""
        self.copies_in_stock += 1
        self._touch()

    def soft_delete(self, when: datetime | None = None) -> None:
        """
        Soft delete this book.

        Raises:
            InvariantViolationError: If the book is already deleted
        """
        if self.is_deleted():
            raise InvariantViolationError("Book", f"book {self.id} is already deleted")
        self.status = Deleted(at=when or datetime.now(UTC))
        self._touch()

    def restore(self) -> None:
        """
        Restore a soft-deleted book.

        Raises:
            InvariantViolationError: If the book is not deleted
        """
        if not self.is_deleted():
            raise InvariantViolationError("Book", f"book {self.id} is not deleted")
        self.status = Active()
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    # Factory methods

    @classmethod
    def create(
        cls,
        isbn: Isbn,
        title: str,
        author: str,
        publication_year: int,
        copies_in_stock: int,
    ) -> "Book":
        """Factory for cataloguing a new book."""
        now = datetime.now(UTC)
        return cls(
            id=isbn,
            title=title.strip() if title else title,
            author=author.strip() if author else author,
            publication_year=publication_year,
            copies_in_stock=copies_in_stock,
            created_at=now,
            updated_at=now,
            status=Active(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: Isbn,
        title: str,
        author: str,
        publication_year: int,
        copies_in_stock: int,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None = None,
    ) -> "Book":
        """Factory for reconstituting a book from persistence."""
        return cls(
            id=id,
            title=title,
            author=author,
            publication_year=publication_year,
            copies_in_stock=copies_in_stock,
            created_at=created_at,
            updated_at=updated_at,
            status=Deleted(at=deleted_at) if deleted_at is not None else Active(),
        )
