"""Pydantic schemas for the borrowing report."""

from datetime import datetime

from pydantic import BaseModel, Field

from libcat.domain.reporting.borrowing_report import BorrowingReport as BorrowingReportModel


class BorrowingEvent(BaseModel):
    """One borrowing inside the reporting window."""

    isbn: str
    book_title: str
    borrowed_at: datetime
    returned_at: datetime | None = None


class BorrowingReport(BaseModel):
    """Borrowing counts per ISBN and the borrowing events of a date range."""

    borrowing_counts_by_book: dict[str, int] = Field(
        default_factory=dict, description="Number of borrowings per ISBN"
    )
    borrowing_events: list[BorrowingEvent] = Field(
        default_factory=list, description="Borrowings ordered by borrowed_at"
    )

    @classmethod
    def from_report(cls, report: BorrowingReportModel) -> "BorrowingReport":
        return cls(
            borrowing_counts_by_book=dict(report.counts_by_isbn),
            borrowing_events=[
                BorrowingEvent(
                    isbn=event.isbn,
                    book_title=event.title,
                    borrowed_at=event.borrowed_at,
                    returned_at=event.returned_at,
                )
                for event in report.events
            ],
        )
