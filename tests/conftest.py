"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import csvtable...' works
without installing the package, and isolates tests from CSVTABLE_* settings
in the developer's environment.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.config.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop CSVTABLE_* variables and the cached settings around every test."""
    for name in ("CSVTABLE_DELIMITER", "CSVTABLE_ENCODING", "CSVTABLE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
