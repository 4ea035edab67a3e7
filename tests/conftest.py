"""Shared fixtures: offer factory and a small region tree.

Region tree used throughout the suite:

    0
    ├── 1
    │   ├── 3
    │   └── 4
    ├── 2
    │   └── 5
    └── 6
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from rental_offers.domain.offer import (
    MILLISECONDS_PER_DAY,
    CarType,
    Offer,
    OfferFilters,
    OfferSearchRequest,
    Paging,
    SortOrder,
)
from rental_offers.domain.region import RegionHierarchy

DAY = MILLISECONDS_PER_DAY
T0 = 1_732_096_800_000  # 2024-11-20T10:00:00Z

REGION_TREE: dict[str, Any] = {
    "id": 0,
    "subregions": [
        {"id": 1, "subregions": [{"id": 3, "subregions": []}, {"id": 4, "subregions": []}]},
        {"id": 2, "subregions": [{"id": 5}]},
        {"id": 6, "subregions": []},
    ],
}


def build_offer(
    id: str = "offer-1",
    *,
    data: str | None = None,
    region: int = 3,
    start: int = T0,
    days: int = 2,
    seats: int = 5,
    price: int = 10_000,
    car_type: CarType = CarType.SMALL,
    vollkasko: bool = False,
    free_km: int = 100,
) -> Offer:
    return Offer(
        id=id,
        data=data if data is not None else f"payload-{id}",
        most_specific_region_id=region,
        start_date=start,
        end_date=start + days * DAY,
        number_seats=seats,
        price=price,
        car_type=car_type,
        has_vollkasko=vollkasko,
        free_kilometers=free_km,
    )


def build_request(
    *,
    region_id: int = 0,
    start: int = T0,
    end: int = T0 + 10 * DAY,
    days: int = 2,
    sort_order: SortOrder = SortOrder.PRICE_ASC,
    page: int = 0,
    page_size: int = 100,
    price_width: int = 1_000,
    km_width: int = 50,
    filters: OfferFilters | None = None,
) -> OfferSearchRequest:
    return OfferSearchRequest(
        region_id=region_id,
        time_range_start=start,
        time_range_end=end,
        number_days=days,
        sort_order=sort_order,
        paging=Paging(page=page, page_size=page_size),
        price_range_width=price_width,
        min_free_kilometer_width=km_width,
        filters=filters or OfferFilters(),
    )


@pytest.fixture()
def make_offer() -> Callable[..., Offer]:
    return build_offer


@pytest.fixture()
def make_request() -> Callable[..., OfferSearchRequest]:
    return build_request


@pytest.fixture()
def regions() -> RegionHierarchy:
    return RegionHierarchy.from_tree(REGION_TREE)
