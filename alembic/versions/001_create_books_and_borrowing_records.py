"""Create books and borrowing_records tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create books and borrowing_records tables."""
    op.create_table(
        "books",
        sa.Column("isbn", sa.String(20), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("publication_year", sa.Integer(), nullable=False),
        sa.Column("copies_in_stock", sa.Integer(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.CheckConstraint("copies_in_stock >= 0", name="ck_books_copies_in_stock_non_negative"),
        sa.CheckConstraint(
            "publication_year BETWEEN 1000 AND 9999", name="ck_books_publication_year_range"
        ),
        sa.PrimaryKeyConstraint("isbn"),
    )
    op.create_index(op.f("ix_books_title"), "books", ["title"], unique=False)
    op.create_index(op.f("ix_books_author"), "books", ["author"], unique=False)
    op.create_index(op.f("ix_books_deleted_at"), "books", ["deleted_at"], unique=False)

    op.create_table(
        "borrowing_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("isbn", sa.String(20), nullable=False),
        sa.Column("borrowed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("returned_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["isbn"], ["books.isbn"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_borrowing_records_isbn"), "borrowing_records", ["isbn"], unique=False
    )
    op.create_index(
        op.f("ix_borrowing_records_borrowed_at"),
        "borrowing_records",
        ["borrowed_at"],
        unique=False,
    )


def downgrade() -> None:
    """Drop borrowing_records and books tables."""
    op.drop_index(op.f("ix_borrowing_records_borrowed_at"), table_name="borrowing_records")
    op.drop_index(op.f("ix_borrowing_records_isbn"), table_name="borrowing_records")
    op.drop_table("borrowing_records")
    op.drop_index(op.f("ix_books_deleted_at"), table_name="books")
    op.drop_index(op.f("ix_books_author"), table_name="books")
    op.drop_index(op.f("ix_books_title"), table_name="books")
    op.drop_table("books")
