# taskapi/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskapi.config import Settings, load_settings
from taskapi.db import build_engine, create_db_and_tables
from taskapi.errors import ApiError
from taskapi.logging_config import setup_logging

# Routers
from taskapi.routers.auth import router as auth_router
from taskapi.routers.health import router as health_router
from taskapi.routers.tasks import router as tasks_router

log = logging.getLogger("taskapi")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = build_engine(settings.DATABASE_URL)
    create_db_and_tables(engine)
    app.state.engine = engine
    log.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        engine.dispose()
        log.info("Database connection closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(title="Task Manager API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- Error shape: always {"message": ...} ----------
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse({"message": exc.message}, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            {"message": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        log.debug("rejected body on %s: %s", request.url.path, exc.errors())
        return JSONResponse({"message": "Invalid request body"}, status_code=400)

    # ---------- Routers ----------
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(tasks_router)

    return app


app = create_app()
