"""Tests for offer records and search parameter validation."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

import pytest

from rental_offers.domain.errors import ValidationError
from rental_offers.domain.offer import (
    MILLISECONDS_PER_DAY,
    FilterValidationError,
    Offer,
    OfferFilters,
    OfferSearchRequest,
    OfferValidationError,
    Paging,
    PagingValidationError,
)


# ==============================================================================
# Offer
# ==============================================================================


def test_valid_offer_passes_validation(make_offer: Callable[..., Offer]) -> None:
    make_offer().validate()


def test_offer_duration(make_offer: Callable[..., Offer]) -> None:
    assert make_offer(days=3).duration_ms == 3 * MILLISECONDS_PER_DAY


@pytest.mark.parametrize(
    ("changes", "message"),
    [
        ({"id": ""}, "ID must not be empty"),
        ({"number_seats": 0}, "numberSeats must be > 0"),
        ({"price": 0}, "price must be > 0"),
        ({"free_kilometers": -1}, "freeKilometers must be >= 0"),
    ],
)
def test_offer_validation_rejects_bad_fields(
    make_offer: Callable[..., Offer], changes: dict, message: str
) -> None:
    offer = replace(make_offer(), **changes)

    with pytest.raises(OfferValidationError, match=message):
        offer.validate()


def test_offer_validation_requires_end_after_start(make_offer: Callable[..., Offer]) -> None:
    offer = make_offer()
    same_instant = replace(offer, end_date=offer.start_date)

    with pytest.raises(OfferValidationError, match="endDate must be after startDate"):
        same_instant.validate()


def test_offer_validation_error_is_a_validation_error(make_offer: Callable[..., Offer]) -> None:
    offer = replace(make_offer(id="x"), price=-5)

    with pytest.raises(ValidationError) as exc_info:
        offer.validate()

    assert exc_info.value.context == {"offer_id": "x"}


def test_offer_is_immutable(make_offer: Callable[..., Offer]) -> None:
    offer = make_offer()

    with pytest.raises(AttributeError):
        offer.price = 1  # type: ignore[misc]


# ==============================================================================
# Paging
# ==============================================================================


def test_paging_offset_is_page_times_size() -> None:
    assert Paging(page=3, page_size=25).offset == 75


def test_paging_rejects_negative_page() -> None:
    with pytest.raises(PagingValidationError, match="page must be >= 0"):
        Paging(page=-1, page_size=10).validate()


def test_paging_rejects_zero_page_size() -> None:
    with pytest.raises(PagingValidationError, match="page_size must be > 0"):
        Paging(page=0, page_size=0).validate()


# ==============================================================================
# Filters and Search Request
# ==============================================================================


def test_empty_filters_are_valid() -> None:
    OfferFilters().validate()


def test_filters_reject_negative_values() -> None:
    with pytest.raises(FilterValidationError) as exc_info:
        OfferFilters(min_free_kilometer=-10).validate()

    assert exc_info.value.context == {"field": "min_free_kilometer"}


@pytest.mark.parametrize(
    ("changes", "message"),
    [
        ({"days": 0}, "number_days must be > 0"),
        ({"price_width": 0}, "price_range_width must be > 0"),
        ({"km_width": 0}, "min_free_kilometer_width must be > 0"),
    ],
)
def test_search_request_rejects_non_positive_values(
    make_request: Callable[..., OfferSearchRequest], changes: dict, message: str
) -> None:
    with pytest.raises(FilterValidationError, match=message):
        make_request(**changes).validate()


def test_search_request_validates_paging(make_request: Callable[..., OfferSearchRequest]) -> None:
    with pytest.raises(PagingValidationError):
        make_request(page_size=0).validate()


def test_search_request_duration(make_request: Callable[..., OfferSearchRequest]) -> None:
    assert make_request(days=4).duration_ms == 4 * MILLISECONDS_PER_DAY
