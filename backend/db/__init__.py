"""Database abstraction layer for SQLite (aiosqlite)."""

from backend.db.connection import (
    Database,
    Result,
    open_database,
)
from backend.db.schema import ensure_schema, init_store

__all__ = ["Database", "Result", "open_database", "ensure_schema", "init_store"]
