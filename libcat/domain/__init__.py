"""
Domain layer.

The domain layer contains the core business logic of the catalog.
It has no dependencies on web frameworks or persistence.

This layer contains:
- Entities: Book and BorrowingRecord
- Value Objects: identifiers and the book status
- Read models: the borrowing report
"""
