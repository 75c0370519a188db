"""Pytest configuration and fixtures."""

import os

# Settings are read when the app module is imported
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from libcat import models  # noqa: E402
from libcat.core import Container  # noqa: E402
from libcat.database import Base, create_db_engine, get_db  # noqa: E402
from libcat.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Single shared connection, so request threads see the test data
test_engine = create_db_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def container(db_session: Session) -> Container:
    """Container wired to the test session, for use case level tests."""
    return Container(db=providers.Object(db_session))


@pytest.fixture
def create_book_payload() -> Callable[..., dict[str, Any]]:
    """Build a valid create request body, overriding any field."""

    def _payload(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "isbn": "9780132350884",
            "title": "Clean Code",
            "author": "Robert C. Martin",
            "publication_year": 2008,
            "copies_in_stock": 2,
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def add_book(db_session: Session) -> Callable[..., models.Book]:
    """Insert a book row directly."""

    def _add(
        isbn: str = "ABC",
        title: str = "Test Book",
        author: str = "Test Author",
        publication_year: int = 2001,
        copies_in_stock: int = 1,
        **kwargs: Any,
    ) -> models.Book:
        book = models.Book(
            isbn=isbn,
            title=title,
            author=author,
            publication_year=publication_year,
            copies_in_stock=copies_in_stock,
            **kwargs,
        )
        db_session.add(book)
        db_session.commit()
        db_session.refresh(book)
        return book

    return _add
