import pytest

from library_app.config import settings
from library_app.library import Library

@pytest.fixture
def paths(tmp_path):
    # Every test gets its own books/members/log files
    return {
        "books_file": str(tmp_path / "books.json"),
        "members_file": str(tmp_path / "members.json"),
        "log_file": str(tmp_path / "transactions.log"),
    }

@pytest.fixture
def lib(paths):
    return Library(**paths)

@pytest.fixture
def cli_settings(paths, monkeypatch):
    # Point the CLI (which reads settings) at the temp files
    for key, value in paths.items():
        monkeypatch.setattr(settings, key, value)
    monkeypatch.setenv("LIB_CLI_OUTPUT", "plain")
    return paths
