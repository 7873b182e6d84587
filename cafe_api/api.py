from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .catalog.data_store import build_catalog
from .catalog.errors import CafeQueryError
from .catalog.models import Catalog
from .catalog.query import parse_query
from .catalog.selection import run_query
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> Catalog:
    """Return the catalog the running app was built with."""
    return request.app.state.catalog


async def _cafe_query_error_handler(request: Request, exc: CafeQueryError) -> PlainTextResponse:
    logger.debug("Rejected %s?%s: %s", request.url.path, request.url.query, type(exc).__name__)
    return PlainTextResponse(exc.message, status_code=400)


def create_app(
    catalog: Catalog | None = None,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> FastAPI:
    """
    Build the API around ``catalog``.

    When no catalog is passed, one is built from ``config``. The catalog
    is read-only for the lifetime of the app.
    """
    setup_logging(config.log_level)
    if catalog is None:
        catalog = build_catalog(config)

    app = FastAPI(title="Café Lookup API", version="1.0.0")
    app.state.catalog = catalog
    app.add_exception_handler(CafeQueryError, _cafe_query_error_handler)

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/cities")
    def cities(catalog: Catalog = Depends(get_catalog)) -> dict[str, list[str]]:
        return {"cities": sorted(catalog)}

    # ── Café lookup ──────────────────────────────────────────────────────

    @app.get("/cafe", response_class=PlainTextResponse)
    def cafe(
        city: str | None = None,
        count: str | None = None,
        search: str | None = None,
        catalog: Catalog = Depends(get_catalog),
    ) -> PlainTextResponse:
        # count stays a raw string so malformed values map to "incorrect count", not a 422
        query = parse_query(catalog, city, count, search)
        selection = run_query(catalog, query)
        return PlainTextResponse(selection.render())

    return app

