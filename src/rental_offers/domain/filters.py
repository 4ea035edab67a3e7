"""Offer filter engine.

Two tiers:
- required: time containment + region, always applied first
- optional: one predicate per facet dimension, so facets can drop their own
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum

from rental_offers.domain.offer import Offer, OfferFilters, OfferSearchRequest
from rental_offers.domain.region import RegionHierarchy

Predicate = Callable[[Offer], bool]


class FilterDimension(str, Enum):
    PRICE = "price"
    CAR_TYPE = "car_type"
    SEATS = "number_seats"
    FREE_KILOMETERS = "free_kilometers"
    VOLLKASKO = "has_vollkasko"


# ==============================================================================
# Required Tier
# ==============================================================================


def matches_time_window(offer: Offer, request: OfferSearchRequest) -> bool:
    """Offer lies fully inside the window and lasts exactly number_days."""
    return (
        offer.start_date >= request.time_range_start
        and offer.end_date <= request.time_range_end
        and offer.duration_ms == request.duration_ms
    )


def matches_required(offer: Offer, request: OfferSearchRequest, regions: RegionHierarchy) -> bool:
    return matches_time_window(offer, request) and regions.contains(
        request.region_id, offer.most_specific_region_id
    )


def base_filtered(
    offers: Iterable[Offer], request: OfferSearchRequest, regions: RegionHierarchy
) -> list[Offer]:
    """Offers surviving the required tier only."""
    return [offer for offer in offers if matches_required(offer, request, regions)]


# ==============================================================================
# Optional Tier
# ==============================================================================


def build_optional_predicates(filters: OfferFilters) -> dict[FilterDimension, Predicate]:
    """
    Build one predicate per active optional filter, keyed by dimension.

    Unset or zero filters produce no entry.
    """
    predicates: dict[FilterDimension, Predicate] = {}

    min_price = filters.min_price or 0
    max_price = filters.max_price or 0
    if min_price and max_price:
        predicates[FilterDimension.PRICE] = lambda o: min_price <= o.price < max_price
    elif min_price:
        predicates[FilterDimension.PRICE] = lambda o: o.price >= min_price
    elif max_price:
        predicates[FilterDimension.PRICE] = lambda o: o.price < max_price

    if filters.car_type is not None:
        car_type = filters.car_type
        predicates[FilterDimension.CAR_TYPE] = lambda o: o.car_type == car_type

    if filters.min_number_seats:
        min_seats = filters.min_number_seats
        predicates[FilterDimension.SEATS] = lambda o: o.number_seats >= min_seats

    if filters.min_free_kilometer:
        min_km = filters.min_free_kilometer
        predicates[FilterDimension.FREE_KILOMETERS] = lambda o: o.free_kilometers >= min_km

    if filters.only_vollkasko:
        predicates[FilterDimension.VOLLKASKO] = lambda o: o.has_vollkasko

    return predicates


def combine(
    predicates: Mapping[FilterDimension, Predicate],
    exclude: FilterDimension | None = None,
) -> Predicate:
    """AND of every predicate except the one keyed by `exclude`."""
    selected = tuple(p for dimension, p in predicates.items() if dimension != exclude)

    if not selected:
        return lambda offer: True
    if len(selected) == 1:
        return selected[0]
    return lambda offer: all(p(offer) for p in selected)


def apply(offers: Iterable[Offer], predicate: Predicate) -> list[Offer]:
    return [offer for offer in offers if predicate(offer)]
