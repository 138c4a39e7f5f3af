"""
Error types raised by the table component.

**Conceptual**: Every failure a caller can see falls into one of three kinds:
the file could not be opened or written, a row's field count disagrees with
the header, or a row index is past the end of the table. Each kind also
subclasses the closest builtin (OSError, ValueError, IndexError) so callers
that already catch those keep working.

**Usage**: Catch `TableError` to handle anything this package raises, or one
of the specific subclasses when the reaction differs (e.g. report the bad
row number on `MalformedRowError`).
"""

from pathlib import Path


class TableError(Exception):
    """Base class for all errors raised by csvtable."""
    pass


class TableIOError(TableError, OSError):
    """
    Raised when a file cannot be opened, read, created or written.

    The underlying OSError (or UnicodeDecodeError) is chained as __cause__.
    """
    pass


class SizeMismatchError(TableError, ValueError):
    """
    Raised when a row's field count differs from the header's.

    Attributes:
        actual: Number of fields in the offending row (or new header).
        expected: Number of fields required.
        row_index: 0-based data row index when known, otherwise None.
    """

    def __init__(self, actual: int, expected: int, row_index: int | None = None, message: str | None = None):
        self.actual = actual
        self.expected = expected
        self.row_index = row_index
        if message is None:
            where = f"row[{row_index}]" if row_index is not None else "row"
            message = f"{where} has different size than header ({actual} != {expected})."
        super().__init__(message)


class OutOfRangeError(TableError, IndexError):
    """
    Raised when a row index is outside `[0, len(rows))`.

    Attributes:
        index: The requested index.
        size: Number of stored rows at the time of the call.
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"row index ({index}) out of bounds for table with {size} rows.")


class MalformedRowError(SizeMismatchError, TableIOError):
    """
    Raised by `Table.load` when a data line does not split into the header's
    field count. It is both a SizeMismatchError and a TableIOError.

    Attributes:
        path: File being loaded.
    """

    def __init__(self, path: Path | str, row_index: int, actual: int, expected: int):
        self.path = Path(path)
        super().__init__(
            actual,
            expected,
            row_index=row_index,
            message=(
                f"{self.path}: row[{row_index}] has different size than header "
                f"({actual} != {expected})."
            ),
        )
