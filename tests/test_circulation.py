"""Tests for borrowing and returning books."""

from collections.abc import Callable
from datetime import UTC, datetime

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from libcat import models


def _records(db_session: Session, isbn: str) -> list[models.BorrowingRecord]:
    db_session.expire_all()
    stmt = (
        select(models.BorrowingRecord)
        .where(models.BorrowingRecord.isbn == isbn)
        .order_by(models.BorrowingRecord.id)
    )
    return list(db_session.execute(stmt).scalars().all())


def _copies(db_session: Session, isbn: str) -> int:
    db_session.expire_all()
    return db_session.get(models.Book, isbn).copies_in_stock


class TestBorrowBook:
    """Test suite for POST /books/{isbn}/borrow."""

    def test_borrow_decrements_stock_and_opens_record(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=2)

        response = client.post("/api/v1/books/ABC/borrow")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Book borrowed successfully"
        assert body["data"]["isbn"] == "ABC"
        assert body["data"]["returned_at"] is None
        assert body["data"]["id"] >= 1

        assert _copies(db_session, "ABC") == 1
        records = _records(db_session, "ABC")
        assert len(records) == 1
        assert records[0].returned_at is None

    def test_borrow_without_copies_fails_and_creates_no_record(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=0)

        response = client.post("/api/v1/books/ABC/borrow")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error"]["code"] == "INVALID_OPERATION"
        assert body["error"]["details"] == "No copies available for borrowing"
        assert _copies(db_session, "ABC") == 0
        assert _records(db_session, "ABC") == []

    def test_borrow_deleted_book_is_not_found(
        self, client: TestClient, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="OLD", copies_in_stock=3, deleted_at=datetime(2024, 1, 1, tzinfo=UTC))

        response = client.post("/api/v1/books/OLD/borrow")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_borrow_missing_book(self, client: TestClient) -> None:
        response = client.post("/api/v1/books/NOPE/borrow")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_stock_never_goes_negative(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=2)

        statuses = [client.post("/api/v1/books/ABC/borrow").status_code for _ in range(4)]

        assert statuses == [200, 200, 400, 400]
        assert _copies(db_session, "ABC") == 0
        assert len(_records(db_session, "ABC")) == 2


class TestReturnBook:
    """Test suite for POST /books/{isbn}/return."""

    def test_borrow_then_return_restores_stock(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=1)
        client.post("/api/v1/books/ABC/borrow")

        response = client.post("/api/v1/books/ABC/return")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Book returned successfully"
        assert body["data"]["returned_at"] is not None

        assert _copies(db_session, "ABC") == 1
        records = _records(db_session, "ABC")
        assert len(records) == 1
        assert records[0].returned_at is not None

    def test_return_without_outstanding_record_fails(
        self, client: TestClient, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=1)

        response = client.post("/api/v1/books/ABC/return")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert (
            response.json()["error"]["details"] == "No active borrowing record found for this book"
        )

    def test_return_missing_book(self, client: TestClient) -> None:
        response = client.post("/api/v1/books/NOPE/return")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_return_closes_oldest_record_first(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=0)
        db_session.add_all(
            [
                models.BorrowingRecord(
                    isbn="ABC", borrowed_at=datetime(2024, 5, 2, 9, 0, tzinfo=UTC)
                ),
                models.BorrowingRecord(
                    isbn="ABC", borrowed_at=datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
                ),
            ]
        )
        db_session.commit()

        response = client.post("/api/v1/books/ABC/return")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["borrowed_at"].startswith("2024-05-01T09:00:00")
        newer, older = _records(db_session, "ABC")
        assert older.returned_at is not None
        assert newer.returned_at is None
        assert _copies(db_session, "ABC") == 1

    def test_return_accepted_for_deleted_book(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="OLD", copies_in_stock=0, deleted_at=datetime(2024, 6, 1, tzinfo=UTC))
        db_session.add(
            models.BorrowingRecord(isbn="OLD", borrowed_at=datetime(2024, 5, 1, tzinfo=UTC))
        )
        db_session.commit()

        response = client.post("/api/v1/books/OLD/return")

        assert response.status_code == status.HTTP_200_OK
        assert _copies(db_session, "OLD") == 1


class TestDeleteWithBorrowings:
    """Interaction between soft delete and outstanding borrowings."""

    def test_delete_blocked_while_borrowed(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=2)
        client.post("/api/v1/books/ABC/borrow")

        response = client.delete("/api/v1/books/ABC")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["details"] == (
            "Cannot delete book as it is currently borrowed. Active borrowings: 1"
        )
        db_session.expire_all()
        assert db_session.get(models.Book, "ABC").deleted_at is None
        assert client.get("/api/v1/books/ABC").json()["data"]["deleted"] is False

    def test_full_lifecycle_single_copy(
        self, client: TestClient, db_session: Session, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="ABC", copies_in_stock=1)

        first = client.post("/api/v1/books/ABC/borrow")
        assert first.status_code == status.HTTP_200_OK
        assert _copies(db_session, "ABC") == 0

        second = client.post("/api/v1/books/ABC/borrow")
        assert second.status_code == status.HTTP_400_BAD_REQUEST

        returned = client.post("/api/v1/books/ABC/return")
        assert returned.status_code == status.HTTP_200_OK
        assert returned.json()["data"]["returned_at"] is not None
        assert _copies(db_session, "ABC") == 1

        deleted = client.delete("/api/v1/books/ABC")
        assert deleted.status_code == status.HTTP_200_OK
        assert deleted.json()["data"]["deleted"] is True
