"""
Domain exceptions.

Entities and value objects raise these when a rule of the library domain
would be broken. The HTTP layer turns them into validation failures.
"""


class DomainError(Exception):
    """Base class of every domain rule failure."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ValidationError(DomainError):
    """
    A value is not acceptable for a domain field.

    Example: blank title, ISBN longer than 20 characters.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class InvariantViolationError(DomainError):
    """
    A state change would leave an entity inconsistent.

    Example: checking out a copy of a book with no copies in stock,
    returning a borrowing that was already returned.
    """

    def __init__(self, entity: str, invariant: str) -> None:
        super().__init__(f"{entity}: {invariant}", {"entity": entity, "invariant": invariant})
        self.entity = entity
        self.invariant = invariant
