"""Tests for CSV bulk upload."""

from collections.abc import Callable

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from libcat import models
from libcat.config import get_settings

UPLOAD_URL = "/api/v1/books/bulk-upload"


def _upload(client: TestClient, content: bytes, filename: str = "books.csv"):  # noqa: ANN202
    return client.post(UPLOAD_URL, files={"file": (filename, content, "text/csv")})


def _book_count(db_session: Session) -> int:
    return db_session.execute(select(func.count()).select_from(models.Book)).scalar_one()


class TestBulkUpload:
    """Test suite for POST /books/bulk-upload."""

    def test_upload_valid_file(self, client: TestClient, db_session: Session) -> None:
        content = (
            b"ISBN,title,author,publication_year,copies\n"
            b"111,Dune,Frank Herbert,1965,3\n"
            b"222,Emma,Jane Austen,1815,1\n"
        )

        response = _upload(client, content)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Books uploaded successfully"
        assert body["data"] == {"imported": 2, "failed": 0, "errors": []}

        book = client.get("/api/v1/books/111").json()["data"]
        assert book["title"] == "Dune"
        assert book["copies_in_stock"] == 3
        assert _book_count(db_session) == 2

    def test_upload_with_one_bad_row_imports_the_rest(
        self, client: TestClient, db_session: Session
    ) -> None:
        content = (
            b"ISBN,title,author,publication_year,copies\n"
            b"111,Dune,Frank Herbert,1965,3\n"
            b"222,Broken,Someone,not-a-year,1\n"
            b"333,Emma,Jane Austen,1815,1\n"
        )

        response = _upload(client, content)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Books uploaded with errors"
        data = body["data"]
        assert data["imported"] == 2
        assert data["failed"] == 1
        assert len(data["errors"]) == 1
        error = data["errors"][0]
        assert error["row"] == 2
        assert error["isbn"] == "222"
        assert "publication_year" in error["error"]
        assert _book_count(db_session) == 2

    def test_upload_reports_duplicate_isbn(
        self, client: TestClient, add_book: Callable[..., models.Book]
    ) -> None:
        add_book(isbn="111")
        content = (
            b"ISBN,title,author,publication_year,copies\n"
            b"111,Dune,Frank Herbert,1965,3\n"
            b"111,Dune Again,Frank Herbert,1965,3\n"
            b"222,Emma,Jane Austen,1815,1\n"
        )

        response = _upload(client, content)

        data = response.json()["data"]
        assert data["imported"] == 1
        assert [(e["row"], e["isbn"]) for e in data["errors"]] == [(1, "111"), (2, "111")]
        assert data["errors"][0]["error"] == "Book already exists with ISBN: 111"

    def test_upload_header_is_case_insensitive_and_columns_may_be_reordered(
        self, client: TestClient
    ) -> None:
        content = b"title,isbn,Author,copies,Publication_Year\nDune,111,Frank Herbert,2,1965\n"

        response = _upload(client, content)

        assert response.json()["data"]["imported"] == 1
        assert client.get("/api/v1/books/111").json()["data"]["publication_year"] == 1965

    def test_upload_missing_column_fails_whole_file(
        self, client: TestClient, db_session: Session
    ) -> None:
        content = b"ISBN,title,author,publication_year\n111,Dune,Frank Herbert,1965\n"

        response = _upload(client, content)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        body = response.json()
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"] == "Missing required columns: copies"
        assert _book_count(db_session) == 0

    def test_upload_with_oversized_field_fails_before_importing_any_row(
        self, client: TestClient, db_session: Session
    ) -> None:
        content = (
            b"ISBN,title,author,publication_year,copies\n"
            b"A1,Dune,Frank Herbert,1965,1\n"
            b"A2," + b"x" * 200_000 + b",Someone,2000,1\n"
            b"A3,Emma,Jane Austen,1815,1\n"
        )

        response = _upload(client, content)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        body = response.json()
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["details"].startswith("Malformed CSV at line 3")
        assert _book_count(db_session) == 0
        assert client.get("/api/v1/books/A1").status_code == status.HTTP_404_NOT_FOUND

    def test_upload_non_utf8_file_fails(self, client: TestClient) -> None:
        content = "ISBN,title,author,publication_year,copies\n1,Café,X,2000,1\n".encode("utf-16")

        response = _upload(client, content)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["error"]["details"] == "File must be UTF-8 encoded CSV"

    def test_upload_too_large_file_fails(self, client: TestClient) -> None:
        limit = get_settings().BULK_UPLOAD_MAX_BYTES
        content = b"ISBN,title,author,publication_year,copies\n" + b"x" * limit

        response = _upload(client, content)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["error"]["details"].startswith("File too large")

    def test_upload_without_file_is_validation_error(self, client: TestClient) -> None:
        response = client.post(UPLOAD_URL)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
