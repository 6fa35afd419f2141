import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.articles import articles_router
from backend.articles.routes import TITLE_REQUIRED
from backend.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT, SQLITE_DB_PATH, STRICT_SCHEMA_INIT
from backend.db import init_store, open_database

logger = logging.getLogger(__name__)


def create_app(db_path: Optional[str] = None) -> FastAPI:
    """Build the API. The store handle lives on app.state for the app's lifetime."""
    path = db_path or SQLITE_DB_PATH

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.db = await open_database(path)
        try:
            await init_store(app.state.db, strict=STRICT_SCHEMA_INIT)
            logger.info("Server is running on port %d", PORT)
            yield
        finally:
            await app.state.db.close()

    app = FastAPI(
        title="Article API",
        description="CRUD over short text articles",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error bodies are {"message": ...} rather than FastAPI's {"detail": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        # A body that is not a JSON object carries no fields, so title is missing
        if any(tuple(e.get("loc", ())) == ("body",) for e in errors):
            message = TITLE_REQUIRED
        else:
            message = errors[0]["msg"] if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        return JSONResponse(status_code=500, content={"message": str(exc)})

    app.include_router(articles_router)
    return app


app = create_app()


def run():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
