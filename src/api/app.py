"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import configure_logging, get_settings
from src.bootstrap import ResponseServices, build_response_services
from src.errors import (
    ConfigError,
    EmbeddingError,
    InvalidArgumentError,
    MentorMatchError,
    NotFoundError,
    StoreError,
)
from src.notes import NotesRepository

from .notes_routes import router as notes_router
from .routes import router

logger = logging.getLogger(__name__)

ERROR_STATUS = [
    (InvalidArgumentError, 422),
    (NotFoundError, 404),
    (ConfigError, 503),
    (EmbeddingError, 502),
    (StoreError, 502),
]


async def _handle_app_error(request: Request, exc: MentorMatchError) -> JSONResponse:
    status = next((code for cls, code in ERROR_STATUS if isinstance(exc, cls)), 500)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


def create_app(
    services: Optional[ResponseServices] = None,
    notes: Optional[NotesRepository] = None,
) -> FastAPI:
    """Build the app. Passing `services` skips building them from settings."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.services_error = None
        if services is not None:
            app.state.services = services
        else:
            configure_logging()
            try:
                app.state.services = build_response_services(get_settings())
            except ConfigError as e:
                logger.error(f"Response services unavailable: {e}")
                app.state.services = None
                app.state.services_error = str(e)
        app.state.notes = notes if notes is not None else NotesRepository()
        yield

    app = FastAPI(
        title="MentorMatch API",
        description="Response similarity, form connections and mentee notes.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(MentorMatchError, _handle_app_error)
    app.include_router(router)
    app.include_router(notes_router)
    return app


app = create_app()
