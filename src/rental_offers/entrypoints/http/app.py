import logging

import uvicorn
from fastapi import FastAPI

from rental_offers.adapters.in_memory_offer_repository import InMemoryOfferRepository
from rental_offers.domain.region import RegionHierarchy
from rental_offers.entrypoints.http.exception_handlers import register_exception_handlers
from rental_offers.entrypoints.http.routes.health import router as health_router
from rental_offers.entrypoints.http.routes.offers import router as offers_router
from rental_offers.infra.config import MEMORY_BACKEND, http_host, http_port, store_backend
from rental_offers.infra.logging_config import configure_logging
from rental_offers.infra.regions import get_region_hierarchy
from rental_offers.ports.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


def build_app(
    offer_repository: OfferRepository | None = None,
    regions: RegionHierarchy | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        offer_repository: Store shared by all requests. Defaults to a fresh
            in-memory store for the memory backend; for the postgres backend
            it stays None and each request opens its own session.
        regions: Region hierarchy. Defaults to the configured region tree.
    """
    configure_logging()

    app = FastAPI(
        title="Rental Offers API",
        description="""
        Search rental car offers with region, time window and optional filters,
        and get facet counts (price, car type, seats, free kilometers,
        Vollkasko) for every search.

        ## Endpoints
        - GET /api/offers: search with facets
        - POST /api/offers: append offers
        - DELETE /api/offers: remove all offers

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    backend = store_backend()
    if offer_repository is None and backend == MEMORY_BACKEND:
        offer_repository = InMemoryOfferRepository()

    app.state.offer_repository = offer_repository
    app.state.regions = regions if regions is not None else get_region_hierarchy()

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(offers_router, prefix="/api")

    logger.info(
        "Application built",
        extra={
            "store_backend": backend,
            "shared_repository": type(offer_repository).__name__ if offer_repository else None,
            "parent_regions": len(app.state.regions),
        },
    )
    return app


app = build_app()


def main() -> None:
    uvicorn.run(
        "rental_offers.entrypoints.http.app:app",
        host=http_host(),
        port=http_port(),
    )


if __name__ == "__main__":
    main()
