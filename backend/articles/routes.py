"""FastAPI router for article endpoints. Thin layer — delegates to database."""

from typing import List, Optional

import aiosqlite
from fastapi import APIRouter, HTTPException, Depends

from backend.db import Database
from backend.db.dependencies import get_store
from backend.articles.models import ArticleIn, ArticleOut, ArticleIdResponse, MessageResponse
from backend.articles import database as db

router = APIRouter(prefix="/api/v1", tags=["articles"])

TITLE_REQUIRED = "Title is required and cannot be blank"
CONTENT_REQUIRED = "Content is required and cannot be blank"
ID_REQUIRED = "ID is required"
ARTICLE_NOT_FOUND = "Article not found"
NO_ARTICLES = "No articles found"

# Failures raised while binding or running a statement. Strings that cannot be
# encoded as UTF-8 (lone surrogates) fail inside the driver with UnicodeError.
STORE_ERRORS = (aiosqlite.Error, UnicodeError)

# Whitespace and line terminators as removed by ECMAScript String.prototype.trim
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

ERROR_RESPONSES = {
    404: {"model": MessageResponse},
    500: {"model": MessageResponse},
}
VALIDATED_RESPONSES = {400: {"model": MessageResponse}, **ERROR_RESPONSES}


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip(TRIM_CHARS)


def _validate_fields(article: Optional[ArticleIn]) -> ArticleIn:
    """Check title then content; only the first failure is reported."""
    article = article or ArticleIn()
    if _is_blank(article.title):
        raise HTTPException(status_code=400, detail=TITLE_REQUIRED)
    if _is_blank(article.content):
        raise HTTPException(status_code=400, detail=CONTENT_REQUIRED)
    return article


def _echo_id(article_id: str):
    """Return the path id as an int when it is a plain integer."""
    return int(article_id) if article_id.isdigit() else article_id


@router.get("/articles", response_model=List[ArticleOut], responses=ERROR_RESPONSES)
async def list_articles(store: Database = Depends(get_store)):
    """List all articles. An empty table is reported as 404."""
    try:
        articles = await db.get_all_articles(store)
    except STORE_ERRORS as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not articles:
        raise HTTPException(status_code=404, detail=NO_ARTICLES)
    return articles


@router.get("/articles/{article_id}", response_model=ArticleOut, responses=ERROR_RESPONSES)
async def get_article(article_id: str, store: Database = Depends(get_store)):
    try:
        article = await db.get_article_by_id(store, article_id)
    except STORE_ERRORS as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not article:
        raise HTTPException(status_code=404, detail=ARTICLE_NOT_FOUND)
    return article


@router.post(
    "/articles",
    response_model=ArticleIdResponse,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def create_article(
    article: Optional[ArticleIn] = None,
    store: Database = Depends(get_store),
):
    """Create an article. Title and content are stored as sent, untrimmed."""
    article = _validate_fields(article)
    try:
        result = await db.insert_article(store, article.title, article.content)
    except STORE_ERRORS as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ArticleIdResponse(id=result.lastrowid)


@router.put("/articles/{article_id}", response_model=ArticleIdResponse, responses=VALIDATED_RESPONSES)
async def update_article(
    article_id: str,
    article: Optional[ArticleIn] = None,
    store: Database = Depends(get_store),
):
    if not article_id:
        raise HTTPException(status_code=400, detail=ID_REQUIRED)
    article = _validate_fields(article)
    try:
        result = await db.update_article(store, article_id, article.title, article.content)
    except STORE_ERRORS as e:
        raise HTTPException(status_code=500, detail=str(e))
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail=ARTICLE_NOT_FOUND)
    return ArticleIdResponse(id=_echo_id(article_id))


@router.delete("/articles/{article_id}", response_model=ArticleIdResponse, responses=ERROR_RESPONSES)
async def delete_article(article_id: str, store: Database = Depends(get_store)):
    try:
        result = await db.delete_article(store, article_id)
    except STORE_ERRORS as e:
        raise HTTPException(status_code=500, detail=str(e))
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail=ARTICLE_NOT_FOUND)
    return ArticleIdResponse(id=_echo_id(article_id))
