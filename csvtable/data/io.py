"""
One-call readers and writers built on `Table`.

**Conceptual**: Scripts usually want "give me the table in this file" rather
than constructing a `Table` and calling `load` themselves. These wrappers do
exactly that, filling in the delimiter and encoding from the CSVTABLE_*
settings when the caller does not pass them.
"""

import logging
from pathlib import Path

from csvtable.config.settings import get_settings
from csvtable.data.table import Table


logger = logging.getLogger(__name__)


def read_table(
    path: Path | str,
    delimiter: str | None = None,
    encoding: str | None = None,
) -> Table:
    """
    Load a delimited text file into a new `Table`.

    Args:
        path: File to read.
        delimiter: Field separator. Defaults to the CSVTABLE_DELIMITER setting
                   (",", unless configured otherwise).
        encoding: Text encoding. Defaults to the CSVTABLE_ENCODING setting.

    Returns:
        Loaded Table.

    Raises:
        TableIOError: If the file cannot be opened or decoded.
        MalformedRowError: If a data line's field count differs from the header.

    Example:
        >>> table = read_table("data/points.csv")
        >>> table.header()
        ['x', 'y']
    """
    if delimiter is None or encoding is None:
        settings = get_settings()
        delimiter = settings.delimiter if delimiter is None else delimiter
        encoding = settings.encoding if encoding is None else encoding

    table = Table(delimiter=delimiter, encoding=encoding)
    table.load(path)
    return table


def write_table(table: Table, path: Path | str) -> None:
    """
    Save a table to a file using the table's own delimiter and encoding.

    Raises:
        TableIOError: If the file cannot be created or written.
    """
    table.save(path)
