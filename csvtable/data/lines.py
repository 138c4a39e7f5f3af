"""
Line-level helpers for the delimited text format.

**Format**: one record per line, fields separated by a single delimiter
character, each line terminated by "\\n". There is no quoting and no
escaping, so a delimiter always ends a field.

These helpers are pure functions on strings; all file handling lives in
table.py.
"""

LINE_TERMINATOR = "\n"


def count_columns(line: str, delimiter: str) -> int:
    """
    Number of fields the first line of a file declares.

    An empty line declares zero columns, otherwise it is the number of
    delimiter occurrences plus one.

    Example:
        >>> count_columns("a,b,c", ",")
        3
        >>> count_columns("", ",")
        0
    """
    if not line:
        return 0
    return line.count(delimiter) + 1


def parse_line(line: str, delimiter: str) -> list[str]:
    """
    Split one line (without its terminator) into fields.

    Naive split: every delimiter is a field boundary, quotes have no meaning.
    An empty line parses to a single empty field; callers that treat the
    header specially use `count_columns` first.

    Example:
        >>> parse_line('1,"a,b",3', ",")
        ['1', '"a', 'b"', '3']
    """
    return line.split(delimiter)


def format_line(fields: list[str], delimiter: str) -> str:
    """Join fields verbatim with the delimiter and append the line terminator."""
    return delimiter.join(fields) + LINE_TERMINATOR


def split_lines(text: str) -> list[str]:
    """
    Split file contents into lines on "\\n".

    A terminator after the last line does not start another line, but only
    one is consumed: "a\\n\\n" yields ["a", ""] (a blank trailing line). A
    final line without a terminator is kept. Empty text yields no lines.

    Only "\\n" terminates a line; a "\\r" before it stays part of the last
    field.
    """
    if not text:
        return []
    lines = text.split(LINE_TERMINATOR)
    # "a\nb\n".split() leaves a trailing "" that is not a line of its own
    if lines[-1] == "":
        lines.pop()
    return lines


def has_unsafe_characters(fields: list[str], delimiter: str) -> bool:
    """True if any field would not survive a save/load round trip."""
    return any(delimiter in field or LINE_TERMINATOR in field for field in fields)
