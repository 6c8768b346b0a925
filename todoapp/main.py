# todoapp/main.py

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todoapp import __version__
from todoapp.api.todos import router as todos_router
from todoapp.core.config import Settings, load_settings
from todoapp.core.database import Database
from todoapp.core.exceptions import StoreError, TodoAppError, TodoValidationError
from todoapp.core.logging_config import configure_logging
from todoapp.db.store import TodoStore

logger = logging.getLogger("todoapp")


def describe_errors(errors) -> str:
    """Flatten pydantic errors into one message, e.g. "content: Input should be a valid string"."""
    parts = []
    for error in errors:
        # drop the leading "body" segment FastAPI adds to locations
        loc = [str(p) for p in error.get("loc", ()) if p != "body"]
        message = error.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Application factory.

    The database handle is acquired in the lifespan context and released on
    shutdown; route handlers reach the store through `app.state`.
    Run with: uvicorn todoapp.main:create_app --factory
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Starting Todo API")
        db = database or Database(settings.database_url)
        db.connect()
        app.state.database = db
        app.state.store    = TodoStore(db)
        logger.info("🎉 Application startup complete!")
        try:
            yield
        finally:
            db.dispose()
            logger.info("👋 Todo API stopped")

    app = FastAPI(
        title       = "Todo API",
        version     = __version__,
        description = "List, create and delete todo items",
        lifespan    = lifespan,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        logger.info(f"📥 Incoming request: {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(f"✅ Request completed in {process_time:.3f}s with status {response.status_code}")
        return response

    # --- Validation errors share one payload shape: {"detail": "<message>"} ---
    @app.exception_handler(TodoValidationError)
    async def todo_validation_handler(request: Request, exc: TodoValidationError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=422, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(
            f"❗️ Validation error for {request.url.path}\n"
            f"Body was: {exc.body!r}\n"
            f"Errors: {exc.errors()!r}"
        )
        return JSONResponse(status_code=422, content={"detail": describe_errors(exc.errors())})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(f"❗️ Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.exception_handler(TodoAppError)
    async def app_error_handler(request: Request, exc: TodoAppError):
        logger.error(f"❗️ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # --- CORS (only the configured frontend origins) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins  = list(settings.cors_origins),
        allow_methods  = ["GET", "POST", "DELETE"],
        allow_headers  = ["Content-Type"],
    )

    app.include_router(todos_router)

    @app.get("/health", tags=["Health"])
    def health_check(request: Request):
        database_ok = request.app.state.database.ping()
        if not database_ok:
            return JSONResponse(status_code=503, content={"status": "unhealthy", "database": False})
        return {"status": "healthy", "database": True}

    return app
