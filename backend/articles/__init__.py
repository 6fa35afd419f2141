"""Articles module — CRUD over the article table."""

from backend.articles.routes import router as articles_router

__all__ = ["articles_router"]
