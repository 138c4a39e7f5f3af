"""
csvtable: one-shot reading and writing of simple delimited text tables.

A table is one header row plus data rows, every cell stored as text. Files
use a single delimiter character per table and no quoting.

    >>> from csvtable import Table
    >>> table = Table(delimiter=";")
    >>> table.load("points.csv")
    >>> table.header(), table.rows()
"""

from csvtable.data.errors import (
    MalformedRowError,
    OutOfRangeError,
    SizeMismatchError,
    TableError,
    TableIOError,
)
from csvtable.data.io import read_table, write_table
from csvtable.data.table import Table

__version__ = "0.3.0"

__all__ = [
    "Table",
    "read_table",
    "write_table",
    "TableError",
    "TableIOError",
    "SizeMismatchError",
    "OutOfRangeError",
    "MalformedRowError",
]
