"""Reporting read models."""

from .borrowing_report import BorrowingEvent, BorrowingReport

__all__ = ["BorrowingEvent", "BorrowingReport"]
