"""SQLite CRUD operations for the article table."""

from typing import Optional, List, Dict, Any

from backend.db import Database, Result


async def get_all_articles(db: Database) -> List[Dict[str, Any]]:
    """Get all articles in store order."""
    return await db.fetch_all("SELECT id, title, content FROM article")


async def get_article_by_id(db: Database, article_id: str) -> Optional[Dict[str, Any]]:
    """Get a single article. The id is compared using the column's integer affinity."""
    return await db.fetch_one(
        "SELECT id, title, content FROM article WHERE id = ?", article_id
    )


async def insert_article(db: Database, title: str, content: str) -> Result:
    """Insert a new article. Result.lastrowid holds the assigned ID."""
    return await db.execute(
        "INSERT INTO article (title, content) VALUES (?, ?)", title, content
    )


async def update_article(db: Database, article_id: str, title: str, content: str) -> Result:
    """Overwrite title and content. Result.rowcount is 0 when no row matched."""
    return await db.execute(
        "UPDATE article SET title = ?, content = ? WHERE id = ?",
        title, content, article_id,
    )


async def delete_article(db: Database, article_id: str) -> Result:
    """Delete an article by ID. Result.rowcount is 0 when no row matched."""
    return await db.execute("DELETE FROM article WHERE id = ?", article_id)
