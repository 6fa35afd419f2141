"""Pydantic request/response schemas for the articles module."""

from pydantic import BaseModel
from typing import Optional, Union


class ArticleIn(BaseModel):
    """Request body for creating or updating an article.

    Both fields are optional here; presence and blankness are checked by the
    route so each field gets its own error message.
    """
    title: Optional[str] = None
    content: Optional[str] = None


class ArticleOut(BaseModel):
    """Single article response."""
    id: int
    title: str
    content: str


class ArticleIdResponse(BaseModel):
    id: Union[int, str]


class MessageResponse(BaseModel):
    message: str
