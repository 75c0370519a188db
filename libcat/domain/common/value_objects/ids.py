from dataclasses import dataclass

from ..entity import EntityId
from ..exceptions import ValidationError

ISBN_MAX_LENGTH = 20


@dataclass(frozen=True)
class Isbn(EntityId):
    """Natural key of a book."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("ISBN cannot be empty", field="isbn")
        if self.value != self.value.strip():
            raise ValidationError(
                "ISBN cannot have surrounding whitespace", field="isbn", value=self.value
            )
        if len(self.value) > ISBN_MAX_LENGTH:
            raise ValidationError(
                f"ISBN cannot be longer than {ISBN_MAX_LENGTH} characters",
                field="isbn",
                value=self.value,
            )


@dataclass(frozen=True)
class BorrowingRecordId(EntityId):
    """Strongly-typed borrowing record identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("BorrowingRecordId must be non-negative")
