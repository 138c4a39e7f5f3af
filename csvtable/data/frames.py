"""
Conversion between `Table` and pandas DataFrames.

**Conceptual**: A `Table` deliberately stores text only. Analysis belongs in
pandas, so this module moves data across that boundary without interpreting
it: cells stay strings in both directions (dtype=object), and typing columns
is left to the caller (e.g. `pd.to_numeric(df["price"])`).
"""

import pandas as pd

from csvtable.data.table import Table


def to_dataframe(table: Table) -> pd.DataFrame:
    """
    Copy a table into a DataFrame of strings.

    Columns are the header in order; duplicate column names are kept as-is.
    An empty table gives an empty DataFrame with the header's columns.

    Example:
        >>> table = Table()
        >>> table.set_header(["x", "y"])
        >>> table.add_row(["1", "2"])
        >>> to_dataframe(table)["x"].tolist()
        ['1']
    """
    return pd.DataFrame(
        [list(row) for row in table.rows()],
        columns=list(table.header()),
        dtype=object,
    )


def from_dataframe(df: pd.DataFrame, delimiter: str = ",", encoding: str = "utf-8") -> Table:
    """
    Build a table from a DataFrame.

    Column labels become the header and every cell is converted with `str`;
    missing values (NaN, None, NaT) become empty strings. The index is
    dropped.

    Args:
        df: DataFrame to copy.
        delimiter: Delimiter of the new table (default ",").
        encoding: Encoding of the new table (default "utf-8").

    Returns:
        Table holding the DataFrame's contents as text.
    """
    table = Table(delimiter=delimiter, encoding=encoding)
    table.set_header([str(col) for col in df.columns])

    # Mask missing values before stringifying so NaN does not become "nan"
    cells = df.astype(object).where(df.notna(), "")
    table.reserve(len(cells))
    for record in cells.itertuples(index=False, name=None):
        table.add_row([str(value) for value in record])

    return table
