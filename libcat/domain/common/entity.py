"""
Entity base classes.

An entity keeps its identity while its state changes: a book is the same
book after its stock or status moves, because its ISBN does not.

Example:
    @dataclass(eq=False)
    class BorrowingRecord(Entity[BorrowingRecordId]):
        id: BorrowingRecordId
        isbn: Isbn
        borrowed_at: datetime
        returned_at: datetime | None = None

Entity subclasses are dataclasses declared with ``eq=False`` so the
identity based ``__eq__`` below is not replaced by a field-wise one.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True, repr=False)
class EntityId(ValueObject):
    """
    Identifier of an entity.

    Borrowing records use a database-generated integer, books use their ISBN.
    """

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Id of an entity that has not been stored yet; the database assigns the real one."""
        return cls(0)

    def to_primitive(self) -> int | str:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Base class for domain entities, compared by ``id`` alone."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
