from fastapi import Request

from .connection import Database


async def get_store(request: Request) -> Database:
    """Return the store handle opened by the application lifespan."""
    return request.app.state.db
