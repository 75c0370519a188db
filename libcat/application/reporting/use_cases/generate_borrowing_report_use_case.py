"""Generate borrowing report use case."""

from datetime import datetime

from libcat.application.circulation.protocols.borrowing_record_repository import (
    BorrowingRecordRepositoryProtocol,
)
from libcat.domain.reporting.borrowing_report import BorrowingEvent, BorrowingReport
from libcat.exceptions import InvalidOperationError
from libcat.utils import ensure_utc


class GenerateBorrowingReportUseCase:
    """Use case for summarising borrowings within a date range."""

    def __init__(self, borrowing_record_repository: BorrowingRecordRepositoryProtocol) -> None:
        self.borrowing_record_repository = borrowing_record_repository

    def generate_report(self, start: datetime, end: datetime) -> BorrowingReport:
        """
        Build the borrowing report for ``[start, end]``, both ends inclusive.

        Naive datetimes are read as UTC.

        Raises:
            InvalidOperationError: If end is before start
        """
        start = ensure_utc(start)
        end = ensure_utc(end)
        if end < start:
            raise InvalidOperationError("End date must not be before start date")

        rows = self.borrowing_record_repository.find_in_range(start, end)
        if not rows:
            return BorrowingReport()

        counts = self.borrowing_record_repository.count_grouped_by_book_in_range(start, end)
        return BorrowingReport(
            counts_by_isbn=dict(counts),
            events=[BorrowingEvent.from_record(record, book) for record, book in rows],
        )
