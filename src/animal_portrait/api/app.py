"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from animal_portrait.api.leads import router as leads_router
from animal_portrait.api.pages import WIZARD_PAGE_HTML
from animal_portrait.api.wizard import router as wizard_router
from animal_portrait.app_logging import configure_logging
from animal_portrait.containers import AppContainer
from animal_portrait.services.errors import (
    FileTooLargeError,
    StepActionError,
    StoreWriteError,
    UnsupportedFileError,
    WrongStepError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(wizard_router)
    app.include_router(leads_router)

    @app.exception_handler(StepActionError)
    async def step_action_error(request: Request, exc: StepActionError) -> JSONResponse:
        return JSONResponse(
            status_code=_step_error_status(exc), content={"detail": str(exc)}
        )

    @app.exception_handler(WrongStepError)
    async def wrong_step_error(request: Request, exc: WrongStepError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.exception_handler(StoreWriteError)
    async def store_write_error(request: Request, exc: StoreWriteError) -> JSONResponse:
        logger.error(
            "Store write failed", exc_info=exc, extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": exc.message}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def wizard_page() -> HTMLResponse:
        """Client-rendered wizard page."""
        return HTMLResponse(WIZARD_PAGE_HTML)

    return app


def _step_error_status(exc: StepActionError) -> int:
    if isinstance(exc, UnsupportedFileError):
        return status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    if isinstance(exc, FileTooLargeError):
        return 413
    return status.HTTP_400_BAD_REQUEST
