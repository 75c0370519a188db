"""Circulation bounded context: borrowing and returning copies."""

from .entities.borrowing_record import BorrowingRecord

__all__ = ["BorrowingRecord"]
