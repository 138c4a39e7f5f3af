"""
In-memory table with one header row and text-only data rows.

**Conceptual**: A `Table` is the one I/O object of this package. It holds a
header (ordered column names) and a list of rows, every cell stored as text,
and can load itself from / save itself to a delimited text file in one shot.
It is not a data container for analysis: there is no column lookup by name,
no typing and no streaming. Hand the rows to pandas (see frames.py) when you
need any of that.

**Invariant**: every stored row has exactly as many fields as the header.
`add_row`, `set_header` and `load` reject anything that would break it with
a `SizeMismatchError`; nothing is truncated or padded silently.

**File format**:
  - One record per line, "\\n" terminated, first line is the header.
  - Fields separated by a single delimiter character fixed per table
    (default ","). The delimiter is never auto-detected.
  - No quoting or escaping. A field containing the delimiter or a newline is
    written verbatim on save and will not load back as the same table.

**Thread safety**: none. Callers sharing a table between threads must guard
it with their own lock.

Example:
    >>> table = Table()
    >>> table.set_header(["a", "b"])
    >>> table.add_row(["1", "2"])
    >>> table.save("out.csv")
    >>> loaded = Table()
    >>> loaded.load("out.csv")
    >>> loaded.rows()
    [['1', '2']]
"""

import codecs
import logging
from pathlib import Path
from typing import Iterable, Sequence

from csvtable.config.settings import TableSettings, get_settings
from csvtable.data.errors import (
    MalformedRowError,
    OutOfRangeError,
    SizeMismatchError,
    TableIOError,
)
from csvtable.data.lines import (
    count_columns,
    format_line,
    has_unsafe_characters,
    parse_line,
    split_lines,
)


logger = logging.getLogger(__name__)


def _text_fields(values: Iterable[str], what: str) -> list[str]:
    """Copy values into a list, rejecting anything that is not a str."""
    fields = list(values)
    for position, value in enumerate(fields):
        if not isinstance(value, str):
            raise ValueError(
                f"{what} field {position} must be str, got {type(value).__name__}: {value!r}"
            )
    return fields


class Table:
    """
    Header plus rows of text fields, loadable from and savable to a file.

    Args:
        delimiter: Single field separator character (default ","). Fixed for
                   the lifetime of the table.
        encoding: Text encoding used by load/save (default "utf-8").

    Raises:
        ValueError: If the delimiter is not exactly one character or is a newline.
                    Also raised for an unknown encoding.
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8"):
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got: {delimiter!r}")
        if delimiter == "\n":
            raise ValueError("delimiter cannot be the line terminator '\\n'")
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"unknown text encoding: {encoding!r}")

        self._delimiter = delimiter
        self._encoding = encoding
        self._header: list[str] = []
        self._rows: list[list[str]] = []

    @classmethod
    def from_settings(cls, settings: TableSettings | None = None) -> "Table":
        """
        Build an empty table from settings (delimiter and encoding).

        Args:
            settings: Settings to use. Defaults to `get_settings()`, i.e. the
                      CSVTABLE_* environment variables.
        """
        settings = settings or get_settings()
        return cls(delimiter=settings.delimiter, encoding=settings.encoding)

    def __repr__(self) -> str:
        return (
            f"Table(delimiter={self._delimiter!r}, columns={len(self._header)}, "
            f"rows={len(self._rows)})"
        )

    def __len__(self) -> int:
        return len(self._rows)

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def column_count(self) -> int:
        return len(self._header)

    def reserve(self, row_count: int) -> None:
        """
        Hint at the number of rows about to be added.

        Python lists grow on their own, so this has no observable effect; it
        is kept so callers that size their tables up front need no special
        casing.

        Raises:
            ValueError: If row_count is negative.
        """
        if row_count < 0:
            raise ValueError(f"row_count must be non-negative, got: {row_count}")

    def clear(self) -> None:
        """Drop header and rows. The delimiter is unchanged."""
        self._header = []
        self._rows = []

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def set_header(self, columns: Sequence[str]) -> None:
        """
        Replace the header with the given column names.

        While the table holds rows, the header may only be renamed, not
        resized: a header of a different width than the stored rows raises
        `SizeMismatchError` and leaves the table unchanged. Call `clear()`
        first to start over with a different shape.

        Args:
            columns: Ordered column names.

        Raises:
            SizeMismatchError: If rows are stored and len(columns) differs
                               from their width.
            ValueError: If a column name is not a str.
        """
        new_header = _text_fields(columns, "header")
        if self._rows and len(new_header) != len(self._header):
            raise SizeMismatchError(
                len(new_header),
                len(self._header),
                message=(
                    f"cannot set header of {len(new_header)} columns on a table "
                    f"holding {len(self._rows)} rows of {len(self._header)} fields; "
                    f"clear() the table first."
                ),
            )
        self._header = new_header

    def header(self) -> list[str]:
        """Current header in column order (the stored list, do not mutate)."""
        return self._header

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def add_row(self, row: Sequence[str]) -> None:
        """
        Append one row.

        Raises:
            SizeMismatchError: If len(row) != len(header()). The row is not
                               appended.
            ValueError: If a field is not a str. The row is not appended.
        """
        fields = _text_fields(row, f"row {len(self._rows)}")
        if len(fields) != len(self._header):
            raise SizeMismatchError(len(fields), len(self._header))
        self._rows.append(fields)

    def extend(self, rows: Iterable[Sequence[str]]) -> None:
        """
        Append several rows, stopping at the first one with the wrong width.

        Rows before the offending one stay appended, same as calling
        `add_row` in a loop.
        """
        for row in rows:
            self.add_row(row)

    def row(self, idx: int) -> list[str]:
        """
        Row at position idx (0 is the first data row, not the header).

        Raises:
            OutOfRangeError: If idx < 0 or idx >= len(rows()).
        """
        if idx < 0 or idx >= len(self._rows):
            raise OutOfRangeError(idx, len(self._rows))
        return self._rows[idx]

    def rows(self) -> list[list[str]]:
        """All data rows in order (the stored list, do not mutate)."""
        return self._rows

    # ------------------------------------------------------------------
    # IO
    # ------------------------------------------------------------------

    def load(self, path: Path | str) -> None:
        """
        Replace header and rows with the contents of a file.

        **Functionally**:
          - Reads the whole file (one shot) with the table's encoding.
          - The first line is the header. Its column count is the number of
            delimiters plus one, or zero when the line is empty.
          - Every following line is split on the delimiter and must produce
            exactly that many fields.
          - A "\\n" after the last line is optional and does not add a row. A
            blank line anywhere after the header is a row with one empty field.

        **Atomicity**: the file is parsed into temporaries first. The table is
        only modified once every line parsed, so on any error it keeps its
        previous header and rows.

        Args:
            path: File to read.

        Raises:
            TableIOError: If the file cannot be opened, read or decoded.
            MalformedRowError: If a data line has a different field count
                               than the header (also a SizeMismatchError).
        """
        path = Path(path)

        try:
            with open(path, "r", encoding=self._encoding, newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TableIOError(f"could not open file \"{path}\" for reading: {e}") from e

        lines = split_lines(text)
        if not lines:
            header: list[str] = []
            data_lines: list[str] = []
        else:
            column_count = count_columns(lines[0], self._delimiter)
            header = parse_line(lines[0], self._delimiter) if column_count else []
            data_lines = lines[1:]

        rows = []
        for row_index, line in enumerate(data_lines):
            fields = parse_line(line, self._delimiter)
            if len(fields) != len(header):
                raise MalformedRowError(path, row_index, len(fields), len(header))
            rows.append(fields)

        self._header = header
        self._rows = rows

        logger.debug(
            "Loaded %s: %d columns, %d rows (delimiter=%r)",
            path, len(header), len(rows), self._delimiter,
        )

    def save(self, path: Path | str) -> None:
        """
        Write header and rows to a file, replacing it if it exists.

        Each line is the fields joined by the delimiter plus "\\n", header
        first, then rows in order. Fields are written verbatim; a field that
        contains the delimiter or a newline produces a file that will not
        load back into the same table (a warning is logged).
        A header of a single empty column name is also logged, since it is
        written as an empty line and loads back with no columns.

        The parent directory must already exist.

        Args:
            path: File to write.

        Raises:
            TableIOError: If the file cannot be created, truncated or written.
        """
        path = Path(path)

        lines = [self._header] + self._rows
        if any(has_unsafe_characters(fields, self._delimiter) for fields in lines):
            logger.warning(
                "Saving %s: some fields contain the delimiter %r or a newline "
                "and will not load back unchanged",
                path, self._delimiter,
            )
        if self._header == [""]:
            # An empty first line loads back as zero columns
            logger.warning(
                "Saving %s: a header of one empty column name is written as an "
                "empty line and will load back as a table with no columns",
                path,
            )

        try:
            with open(path, "w", encoding=self._encoding, newline="") as handle:
                for fields in lines:
                    handle.write(format_line(fields, self._delimiter))
        except (OSError, UnicodeEncodeError) as e:
            raise TableIOError(f"could not write file \"{path}\": {e}") from e

        logger.debug(
            "Saved %s: %d columns, %d rows (delimiter=%r)",
            path, len(self._header), len(self._rows), self._delimiter,
        )
