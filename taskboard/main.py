"""FastAPI application entry point."""

import logging
import sqlite3
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .db import init_db
from .errors import TaskboardError, ValidationError
from .logging_setup import setup_logging
from .routers import comments, tasks, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and initialize database on startup."""
    setup_logging(settings.log_level)
    init_db()
    logger.info("Taskboard API started")
    yield


app = FastAPI(
    title="Taskboard API",
    description="Task management with comments and per-task change logs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(tasks.router)
app.include_router(comments.router)


@app.exception_handler(TaskboardError)
async def taskboard_error_handler(request: Request, exc: TaskboardError):
    """Render domain errors with their status code and, for validation, the field."""
    content = {"detail": exc.message}
    if isinstance(exc, ValidationError) and exc.field:
        content["field"] = exc.field
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies and parameters as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(sqlite3.Error)
async def database_error_handler(request: Request, exc: sqlite3.Error):
    """Log unexpected store failures and hide their details from clients."""
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
def health():
    """Liveness check."""
    return {"status": "ok"}


def main():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "taskboard.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
