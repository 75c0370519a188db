"""Tests for the borrowing report use case."""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from sqlalchemy.orm import Session

from libcat import models
from libcat.core import Container
from libcat.exceptions import InvalidOperationError


def test_generate_report(
    container: Container, db_session: Session, add_book: Callable[..., models.Book]
) -> None:
    add_book(isbn="A", title="Alpha")
    db_session.add_all(
        [
            models.BorrowingRecord(isbn="A", borrowed_at=datetime(2024, 1, 2, tzinfo=UTC)),
            models.BorrowingRecord(isbn="A", borrowed_at=datetime(2024, 1, 1, tzinfo=UTC)),
        ]
    )
    db_session.commit()

    report = container.generate_borrowing_report_use_case().generate_report(
        datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 1, 31, tzinfo=UTC)
    )

    assert report.counts_by_isbn == {"A": 2}
    assert [event.borrowed_at for event in report.events] == [
        datetime(2024, 1, 1, tzinfo=UTC),
        datetime(2024, 1, 2, tzinfo=UTC),
    ]
    assert report.events[0].title == "Alpha"


def test_naive_bounds_are_read_as_utc(
    container: Container, db_session: Session, add_book: Callable[..., models.Book]
) -> None:
    add_book(isbn="A")
    db_session.add(
        models.BorrowingRecord(isbn="A", borrowed_at=datetime(2024, 1, 1, 12, 0, tzinfo=UTC))
    )
    db_session.commit()

    report = container.generate_borrowing_report_use_case().generate_report(
        datetime(2024, 1, 1, 12, 0), datetime(2024, 1, 1, 12, 0)
    )

    assert report.counts_by_isbn == {"A": 1}


def test_empty_range_returns_empty_report(container: Container) -> None:
    report = container.generate_borrowing_report_use_case().generate_report(
        datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 1, 2, tzinfo=UTC)
    )

    assert report.is_empty()
    assert report.counts_by_isbn == {}
    assert report.events == []


def test_end_before_start_raises(container: Container) -> None:
    with pytest.raises(InvalidOperationError):
        container.generate_borrowing_report_use_case().generate_report(
            datetime(2024, 2, 1, tzinfo=UTC), datetime(2024, 1, 1, tzinfo=UTC)
        )
