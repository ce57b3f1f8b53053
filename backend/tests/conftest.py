"""Root conftest — shared test configuration."""

import os

# Settings requires DATABASE_URL; tests never reach a real server
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
