import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.controller import TrackerController
from app.core.logging_middleware import LoggingMiddleware
from app.db.init_db import init_db
from app.db.session import SessionLocal
from app.db.store import CorruptStorageError, TrackerStore
from app.routers.assignments import router as assignments_router
from app.routers.dashboard import router as dashboard_router
from app.routers.pages import router as pages_router
from app.routers.submissions import router as submissions_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(controller: Optional[TrackerController] = None) -> FastAPI:
    """Build the tracker app around one controller (a SQLite-backed one by default)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if controller is None:
            init_db()
            app.state.controller = TrackerController(TrackerStore(SessionLocal))
        yield

    app = FastAPI(title="Assignment Tracker", lifespan=lifespan)
    if controller is not None:
        app.state.controller = controller

    # Middleware
    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(CorruptStorageError)
    async def corrupt_storage_handler(request: Request, exc: CorruptStorageError):
        logger.error("Corrupt storage while handling %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.include_router(pages_router, tags=["pages"])
    app.include_router(assignments_router, tags=["assignments"])
    app.include_router(submissions_router, tags=["submissions"])
    app.include_router(dashboard_router, tags=["dashboard"])

    return app


app = create_app()
