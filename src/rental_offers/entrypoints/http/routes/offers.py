from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from rental_offers.entrypoints.http.dependencies import (
    get_clear_offers_use_case,
    get_create_offers_use_case,
    get_search_offers_use_case,
)
from rental_offers.entrypoints.http.dtos.offers import (
    CreateOffersRequestDTO,
    OffersSearchQueryDTO,
    OffersSearchResponseDTO,
)
from rental_offers.entrypoints.http.error_responses import ErrorResponse
from rental_offers.entrypoints.http.mappers.offer_mapper import OfferMapper
from rental_offers.use_cases.clear_offers import ClearOffers
from rental_offers.use_cases.create_offers import CreateOffers
from rental_offers.use_cases.search_offers import SearchOffers


router = APIRouter(tags=["Offers"])


@router.get(
    "/offers",
    response_model=OffersSearchResponseDTO,
    summary="Search offers",
    description="""
    Search rental offers and get facet counts for the current query.

    ## Required filters
    - Region: a parent region matches every leaf region below it
    - Time: the offer must lie inside [timeRangeStart, timeRangeEnd] and last
      exactly numberDays days

    ## Optional filters
    minPrice (inclusive), maxPrice (exclusive), minNumberSeats, carType,
    onlyVollkasko, minFreeKilometer. Zero or omitted means no filter.

    ## Facets
    Each facet applies every optional filter except its own, so it shows the
    values still selectable for that dimension.

    ## Paging
    Zero-based `page`; sorted by price, ties broken by ID ascending.
    """,
    responses={400: {"model": ErrorResponse, "description": "Invalid query parameters"}},
)
def search_offers(
    query: Annotated[OffersSearchQueryDTO, Query()],
    use_case: SearchOffers = Depends(get_search_offers_use_case),
) -> OffersSearchResponseDTO:
    """Search offers endpoint following parse → execute → map → return pattern."""
    request = OfferMapper.to_domain_request(query)

    result = use_case.execute(request)

    return OfferMapper.to_response(result)


@router.post(
    "/offers",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Create offers",
    description="Append a batch of offers. At least one offer is required.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid or empty batch"},
        409: {"model": ErrorResponse, "description": "Offer ID already exists"},
    },
)
def create_offers(
    payload: CreateOffersRequestDTO,
    use_case: CreateOffers = Depends(get_create_offers_use_case),
) -> Response:
    use_case.execute(OfferMapper.to_create_request(payload))
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/offers",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete all offers",
)
def clear_offers(use_case: ClearOffers = Depends(get_clear_offers_use_case)) -> Response:
    use_case.execute()
    return Response(status_code=status.HTTP_200_OK)
