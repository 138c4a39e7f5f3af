"""
Configuration settings for csvtable.

**Conceptual**: A table's delimiter is fixed in code for most callers, but
scripts that process files from different sources often want the delimiter,
text encoding and log verbosity to come from the environment instead. This
module provides one strongly-typed settings object that loads those defaults
from environment variables (via a .env file when present) and validates them
up front.

**Why centralized config?**
  - Single source of truth for the defaults used by `read_table`,
    `Table.from_settings` and `configure_logging`.
  - Easy to test (construct `TableSettings(...)` directly instead of reading
    the environment).
  - Fail-fast validation (a two-character delimiter is rejected when the
    settings are built, not halfway through a load).

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import codecs
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


# Project root is 2 levels up from csvtable/config/settings.py
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TableSettings:
    """
    Defaults applied when a table is built without explicit options.

    Attributes:
        delimiter: Single field separator character (default ",").
                   Must not be a newline.
        encoding: Text encoding for load/save (default "utf-8").
                  Must be a codec name Python knows.
        log_level: Level name for the "csvtable" logger (default "WARNING").
    """
    delimiter: str = ","
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if len(self.delimiter) != 1 or self.delimiter == "\n":
            raise ValueError(
                f"CSVTABLE_DELIMITER must be exactly one non-newline character, got: {self.delimiter!r}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(
                f"CSVTABLE_ENCODING is not a known text encoding, got: {self.encoding!r}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"CSVTABLE_LOG_LEVEL must be one of {list(_LOG_LEVELS)}, got: {self.log_level!r}"
            )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level, e.g. logging.WARNING."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls) -> "TableSettings":
        """
        Load settings from environment variables.

        **Environment variables** (all optional):
          - CSVTABLE_DELIMITER: field separator (default ",").
            The value "\\t" (backslash, t) is accepted as a tab.
          - CSVTABLE_ENCODING: text encoding (default "utf-8").
          - CSVTABLE_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default "WARNING").

        A .env file at the project root is read first; variables already set
        in the environment win over it.

        Returns:
            TableSettings with values loaded from environment.

        Raises:
            ValueError: If any variable holds an invalid value.

        Usage example:
            >>> # In .env file:
            >>> # CSVTABLE_DELIMITER=;
            >>>
            >>> settings = TableSettings.from_env()
            >>> print(settings.delimiter)  # ";"
        """
        load_dotenv(dotenv_path=PROJECT_ROOT / ".env", override=False)

        delimiter = os.getenv("CSVTABLE_DELIMITER", ",")
        if delimiter == "\\t":
            delimiter = "\t"
        encoding = os.getenv("CSVTABLE_ENCODING", "utf-8")
        log_level = os.getenv("CSVTABLE_LOG_LEVEL", "WARNING")

        return cls(
            delimiter=delimiter,
            encoding=encoding,
            log_level=log_level,
        )


# Settings are loaded on first use, not at import time.
# Tests construct TableSettings directly or call reset_settings().
_default_settings: TableSettings | None = None


def get_settings() -> TableSettings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached for
    reuse. Explicit arguments to `Table` or `read_table` always win over them.

    Returns:
        Global TableSettings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = TableSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    Clears the cached settings so the next `get_settings()` call re-reads
    the environment.
    """
    global _default_settings
    _default_settings = None
