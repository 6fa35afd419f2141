"""Article table definition and first-run seed data."""

import logging

import aiosqlite

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS article (
    id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL
);
"""

SEED_ARTICLES = [
    ("안녕하세요", "처음 뵙겠습니다."),
    ("가입인사드립니다.", "반갑습니다."),
    ("코딩을 처음 배우기 시작했습니다.", "잘 부탁드립니다."),
]


async def ensure_schema(db) -> int:
    """Create the article table if it doesn't exist and seed it when empty.

    Returns the number of rows seeded. Seeding only happens when the table
    holds zero rows at startup; existing rows are never touched.
    """
    await db.execute_script(SCHEMA)

    row = await db.fetch_one("SELECT COUNT(*) AS count FROM article")
    if row["count"] != 0:
        return 0

    # Single multi-row INSERT keeps the seed rows in order
    placeholders = ", ".join("(?, ?)" for _ in SEED_ARTICLES)
    args = [value for pair in SEED_ARTICLES for value in pair]
    result = await db.execute(
        f"INSERT INTO article (title, content) VALUES {placeholders}", *args
    )
    logger.info("Seeded article table with %d rows", result.rowcount)
    return result.rowcount


async def init_store(db, strict: bool = False) -> None:
    """Run ensure_schema, logging failures instead of raising unless strict."""
    try:
        await ensure_schema(db)
    except aiosqlite.Error as e:
        logger.error("Schema initialization failed: %s", e)
        if strict:
            raise
