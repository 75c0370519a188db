"""Custom exception hierarchy for the library catalog service."""

from starlette import status

from libcat.constants import ErrorCode


class LibraryError(Exception):
    """Base exception for all library catalog errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: ErrorCode = ErrorCode.UPSTREAM_ERROR,
    ) -> None:
        """Initialize exception with message, status code and error code."""
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(self.message)


class NotFoundError(LibraryError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, code=ErrorCode.NOT_FOUND)


class BookNotFoundError(NotFoundError):
    """Book not found error."""

    def __init__(self, isbn: str | None = None, *, message: str | None = None) -> None:
        """Initialize with ISBN or custom message."""
        self.isbn = isbn
        if message:
            super().__init__(message)
        elif isbn is not None:
            super().__init__(f"Book not found with ISBN: {isbn}")
        else:
            super().__init__("Book not found")


class InvalidOperationError(LibraryError):
    """A business rule forbids the requested operation."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=status_code, code=ErrorCode.INVALID_OPERATION)


class BookAlreadyExistsError(InvalidOperationError):
    """A book with the same ISBN is already catalogued."""

    def __init__(self, isbn: str) -> None:
        """Initialize with the conflicting ISBN."""
        self.isbn = isbn
        super().__init__(
            f"Book already exists with ISBN: {isbn}", status_code=status.HTTP_409_CONFLICT
        )


class ValidationError(LibraryError):
    """Malformed input."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 422 status code."""
        super().__init__(
            message,
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            code=ErrorCode.VALIDATION_ERROR,
        )


class UpstreamError(LibraryError):
    """Unexpected failure while talking to the datastore."""

    def __init__(self, message: str = "Datastore operation failed") -> None:
        """Initialize with message and 500 status code."""
        super().__init__(
            message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=ErrorCode.UPSTREAM_ERROR,
        )
