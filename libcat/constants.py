"""
Application constants.

Error codes and the user-facing messages returned in API responses.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable failure kinds surfaced in the error envelope."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_OPERATION = "INVALID_OPERATION"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


class ResponseMessages:
    """Success messages for API responses."""

    BOOKS_RETRIEVED = "Books retrieved successfully"
    BOOK_RETRIEVED = "Book retrieved successfully"
    BOOK_CREATED = "Book created successfully"
    BOOK_UPDATED = "Book updated successfully"
    BOOK_DELETED = "Book successfully marked as deleted"
    BOOK_RESTORED = "Book successfully restored"
    BOOK_BORROWED = "Book borrowed successfully"
    BOOK_RETURNED = "Book returned successfully"
    BOOKS_UPLOADED = "Books uploaded successfully"
    BOOKS_PARTIALLY_UPLOADED = "Books uploaded with errors"
    REPORT_GENERATED = "Borrowing report generated successfully"
    NO_SEARCH_RESULTS = "No books found matching the search criteria"
    NO_BORROWINGS_IN_PERIOD = "No borrowing records found for the period"


class ErrorMessages:
    """Summary messages for failure responses, keyed by error code."""

    BY_CODE: dict[ErrorCode, str] = {
        ErrorCode.NOT_FOUND: "Resource not found",
        ErrorCode.INVALID_OPERATION: "Invalid operation",
        ErrorCode.VALIDATION_ERROR: "Validation failed",
        ErrorCode.UPSTREAM_ERROR: "Internal server error",
    }
