"""
Application factory for the Items API.

``create_app`` assembles the FastAPI application: it sets up logging,
builds (or accepts) the item store and the shared read cache, wires
them into an ``ItemService`` stored on ``app.state``, registers the
error handlers and includes the versioned routers.  Serve the result
with uvicorn, e.g. via ``run.py``::

    python run.py

Tests pass their own ``Settings``, ``ItemStore`` or ``ItemCache`` to
get an isolated application per test.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import ItemsApiError
from .core.logging_config import setup_logging
from .services.item_cache import ItemCache
from .services.item_service import ItemService
from .services.item_store import ItemStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ItemStore] = None,
    cache: Optional[ItemCache] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module-level settings.
    store : Optional[ItemStore]
        Item store; built from ``settings.database_url`` when omitted.
    cache : Optional[ItemCache]
        Read cache; a fresh, empty cache when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = ItemStore(settings.database_url, settings.database_timeout)
    if cache is None:
        cache = ItemCache()

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.item_service = ItemService(
        store, cache, report_missing_rows=settings.report_missing_rows
    )

    @app.exception_handler(ItemsApiError)
    async def items_api_error_handler(request: Request, exc: ItemsApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies are a client error, reported as 400 rather than 422.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    app.include_router(v1_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        store.init_schema()

    return app
