"""Reader for CSV book import files."""

import csv
import io
from collections.abc import Iterator
from typing import BinaryIO

from libcat.application.library.use_cases.book_import.bulk_import_books_use_case import BookRow
from libcat.exceptions import ValidationError

# Header as written in import files; matching ignores case and surrounding spaces
CSV_HEADER = ("ISBN", "title", "author", "publication_year", "copies")


def read_book_rows(stream: BinaryIO) -> Iterator[BookRow]:
    """
    Parse a UTF-8 CSV import file into book rows.

    The whole file is decoded and parsed before the first row is yielded, so a
    malformed file fails without any row being imported. Blank lines are
    skipped. Cells are stripped; missing cells become "".

    Args:
        stream: Binary stream holding the CSV file

    Returns:
        Iterator of BookRow in file order

    Raises:
        ValidationError: If the file is not UTF-8, is empty, lacks a required
            column or is not parseable as CSV
    """
    try:
        text = stream.read().decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValidationError("File must be UTF-8 encoded CSV") from e

    reader = csv.reader(io.StringIO(text, newline=""))
    try:
        header = next(reader, None)
        if header is None:
            raise ValidationError("File is empty")

        columns = {name.strip().lower(): index for index, name in enumerate(header)}
        missing = [name for name in CSV_HEADER if name.lower() not in columns]
        if missing:
            raise ValidationError(f"Missing required columns: {', '.join(missing)}")

        positions = [columns[name.lower()] for name in CSV_HEADER]
        rows = list(_iter_rows(reader, positions))
    except csv.Error as e:
        raise ValidationError(f"Malformed CSV at line {reader.line_num}: {e}") from e
    return iter(rows)


def _iter_rows(reader: Iterator[list[str]], positions: list[int]) -> Iterator[BookRow]:
    for cells in reader:
        if not any(cell.strip() for cell in cells):
            continue
        values = [cells[i].strip() if i < len(cells) else "" for i in positions]
        yield BookRow(*values)
