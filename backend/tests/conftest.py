"""Root conftest - shared test configuration."""

import os

# Point settings at SQLite before biztime.main is imported
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
