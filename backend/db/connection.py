"""SQLite connection management — one store handle per process."""

import logging
import os
from typing import Optional

import aiosqlite

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Result wrapper
# ---------------------------------------------------------------------------

class Result:
    """Wraps execute() results to provide lastrowid and rowcount."""
    __slots__ = ("lastrowid", "rowcount")

    def __init__(self, lastrowid: Optional[int], rowcount: int):
        self.lastrowid = lastrowid
        self.rowcount = rowcount

    def __repr__(self) -> str:
        return f"Result(lastrowid={self.lastrowid!r}, rowcount={self.rowcount!r})"


# ---------------------------------------------------------------------------
# Database wrapper
# ---------------------------------------------------------------------------

class Database:
    """Thin async wrapper over an aiosqlite connection."""

    def __init__(self, conn: aiosqlite.Connection, path: str):
        self._conn = conn
        self.path = path

    async def execute(self, query: str, *args) -> Result:
        """Execute a write query (INSERT/UPDATE/DELETE) and commit it."""
        cursor = await self._conn.execute(query, args)
        try:
            lastrowid = cursor.lastrowid
            if not query.lstrip().upper().startswith("INSERT"):
                lastrowid = None
            result = Result(lastrowid=lastrowid, rowcount=cursor.rowcount)
        finally:
            await cursor.close()
        await self._conn.commit()
        return result

    async def fetch_one(self, query: str, *args) -> Optional[dict]:
        """Fetch a single row as a dict, or None."""
        async with self._conn.execute(query, args) as cursor:
            row = await cursor.fetchone()
        return dict(row) if row else None

    async def fetch_all(self, query: str, *args) -> list[dict]:
        """Fetch all rows as a list of dicts."""
        rows = await self._conn.execute_fetchall(query, args)
        return [dict(r) for r in rows]

    async def execute_script(self, sql: str) -> None:
        """Execute multi-statement DDL (no parameters)."""
        await self._conn.executescript(sql)
        await self._conn.commit()

    async def close(self) -> None:
        await self._conn.close()
        logger.info("Store closed: %s", self.path)


async def open_database(path: str) -> Database:
    """Open the store. Called once by the application lifespan."""
    if path != ":memory:":
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
    conn = await aiosqlite.connect(path)
    conn.row_factory = aiosqlite.Row
    logger.info("Store opened: %s", path)
    return Database(conn=conn, path=path)
