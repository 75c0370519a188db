import io

import pytest

from libcat.application.library.use_cases.book_import.bulk_import_books_use_case import BookRow
from libcat.exceptions import ValidationError
from libcat.infrastructure.library.services.csv_row_reader import read_book_rows


def _read(content: bytes) -> list[BookRow]:
    return list(read_book_rows(io.BytesIO(content)))


def test_reads_rows_in_file_order() -> None:
    rows = _read(
        b"ISBN,title,author,publication_year,copies\n"
        b"111,Dune,Frank Herbert,1965,3\n"
        b'222,"Emma, Volume 1",Jane Austen,1815,1\n'
    )

    assert rows == [
        BookRow("111", "Dune", "Frank Herbert", "1965", "3"),
        BookRow("222", "Emma, Volume 1", "Jane Austen", "1815", "1"),
    ]


def test_strips_cells_and_skips_blank_lines() -> None:
    rows = _read(
        b"ISBN , Title ,author,publication_year,copies\r\n"
        b" 111 , Dune ,Frank Herbert,1965,3\r\n"
        b"\r\n"
        b",,,,\r\n"
    )

    assert rows == [BookRow("111", "Dune", "Frank Herbert", "1965", "3")]


def test_short_rows_get_empty_cells() -> None:
    rows = _read(b"ISBN,title,author,publication_year,copies\n111,Dune\n")

    assert rows == [BookRow("111", "Dune", "", "", "")]


def test_utf8_bom_is_ignored() -> None:
    content = "ISBN,title,author,publication_year,copies\n1,Café,Zoë,2000,1\n".encode("utf-8-sig")

    rows = _read(content)

    assert rows == [BookRow("1", "Café", "Zoë", "2000", "1")]


def test_header_problems_fail_before_any_row() -> None:
    with pytest.raises(ValidationError, match="Missing required columns: author, copies"):
        read_book_rows(io.BytesIO(b"ISBN,title,publication_year\n1,Dune,1965\n"))


def test_empty_file_fails() -> None:
    with pytest.raises(ValidationError, match="File is empty"):
        read_book_rows(io.BytesIO(b""))


def test_non_utf8_file_fails() -> None:
    with pytest.raises(ValidationError, match="UTF-8"):
        read_book_rows(io.BytesIO(b"ISBN,title\n\xff\xfe\n"))


def test_oversized_field_fails_whole_file() -> None:
    content = (
        b"ISBN,title,author,publication_year,copies\n"
        b"1,Dune,Frank Herbert,1965,1\n"
        b"2," + b"x" * 200_000 + b",Someone,2000,1\n"
    )

    with pytest.raises(ValidationError, match="Malformed CSV at line 3"):
        read_book_rows(io.BytesIO(content))
