from __future__ import annotations

import logging
from dataclasses import dataclass

from rental_offers.domain import filters, results
from rental_offers.domain.aggregation import Facets, compute_facets
from rental_offers.domain.offer import OfferSearchRequest, OfferSummary
from rental_offers.domain.region import RegionHierarchy
from rental_offers.ports.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchOffersResponse:
    offers: list[OfferSummary]
    facets: Facets
    total_count: int  # offers matching every filter, before paging


class SearchOffers:
    """
    Offer search with facets.

    Pipeline:
        snapshot -> required filters -> base filtered set
        base -> all optional filters -> sort -> page -> summaries
        base -> five leave-one-out facets

    Both branches read the same base set; facets do not depend on sort order
    or paging.
    """

    def __init__(self, offer_repository: OfferRepository, regions: RegionHierarchy) -> None:
        self._repository = offer_repository
        self._regions = regions

    def execute(self, request: OfferSearchRequest) -> SearchOffersResponse:
        """
        Execute a search.

        Args:
            request: Search parameters

        Returns:
            One page of offer summaries plus the five facets

        Raises:
            FilterValidationError: If search window, widths or filters are invalid
            PagingValidationError: If paging parameters are invalid
        """
        request.validate()

        base = filters.base_filtered(self._repository.snapshot(), request, self._regions)
        predicates = filters.build_optional_predicates(request.filters)

        matching = filters.apply(base, filters.combine(predicates))
        ordered = results.sort_offers(matching, request.sort_order)
        page = results.paginate(ordered, request.paging)

        facets = compute_facets(base, predicates, request)

        logger.debug(
            "Search executed",
            extra={
                "region_id": request.region_id,
                "base_count": len(base),
                "total_count": len(matching),
                "page": request.paging.page,
                "page_size": request.paging.page_size,
            },
        )

        return SearchOffersResponse(
            offers=results.to_summaries(page),
            facets=facets,
            total_count=len(matching),
        )
