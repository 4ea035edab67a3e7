"""
Dependency injection for FastAPI routes.

The offer store is owned by the app: build_app() puts either an in-memory
repository on app.state (shared by all requests, guarded by its own lock) or
nothing, in which case each request gets a Postgres repository bound to its
own session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request

from rental_offers.adapters.postgres_offer_repository import PostgresOfferRepository
from rental_offers.domain.region import RegionHierarchy
from rental_offers.infra.db.session import get_session
from rental_offers.ports.offer_repository import OfferRepository
from rental_offers.use_cases.clear_offers import ClearOffers
from rental_offers.use_cases.create_offers import CreateOffers
from rental_offers.use_cases.search_offers import SearchOffers


def get_offer_repository(request: Request) -> Generator[OfferRepository, None, None]:
    """
    Provides the offer repository for a single request.

    In-memory backend: yields the app-wide repository.
    Postgres backend: opens a session (commit on success, rollback on error)
    and yields a repository bound to it.

    Yields:
        OfferRepository: repository for this request
    """
    repository: OfferRepository | None = getattr(request.app.state, "offer_repository", None)
    if repository is not None:
        yield repository
        return

    with get_session() as session:
        yield PostgresOfferRepository(session=session)


def get_regions(request: Request) -> RegionHierarchy:
    """Region hierarchy loaded once in build_app()."""
    return request.app.state.regions


def get_search_offers_use_case(
    repository: OfferRepository = Depends(get_offer_repository),
    regions: RegionHierarchy = Depends(get_regions),
) -> SearchOffers:
    return SearchOffers(offer_repository=repository, regions=regions)


def get_create_offers_use_case(
    repository: OfferRepository = Depends(get_offer_repository),
) -> CreateOffers:
    return CreateOffers(offer_repository=repository)


def get_clear_offers_use_case(
    repository: OfferRepository = Depends(get_offer_repository),
) -> ClearOffers:
    return ClearOffers(offer_repository=repository)
