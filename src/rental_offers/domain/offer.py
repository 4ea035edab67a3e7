from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rental_offers.domain.errors import ValidationError


MILLISECONDS_PER_DAY = 86_400_000


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when search or filter parameters are invalid."""

    pass


class OfferValidationError(ValidationError):
    """Raised when an offer submitted for creation is malformed."""

    pass


# ==============================================================================
# Value Types
# ==============================================================================


class CarType(str, Enum):
    SMALL = "small"
    SPORTS = "sports"
    LUXURY = "luxury"
    FAMILY = "family"


class SortOrder(str, Enum):
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"


@dataclass(frozen=True, slots=True)
class Offer:
    id: str
    data: str
    most_specific_region_id: int
    start_date: int  # ms since epoch
    end_date: int  # ms since epoch
    number_seats: int
    price: int  # minor currency unit
    car_type: CarType
    has_vollkasko: bool
    free_kilometers: int

    @property
    def duration_ms(self) -> int:
        return self.end_date - self.start_date

    def validate(self) -> None:
        """
        Validate a single offer before it is stored.

        Raises:
            OfferValidationError: If the offer breaks a record invariant
        """
        if not self.id:
            raise OfferValidationError("ID must not be empty", offer_id=self.id)
        if self.end_date <= self.start_date:
            raise OfferValidationError("endDate must be after startDate", offer_id=self.id)
        if self.number_seats <= 0:
            raise OfferValidationError("numberSeats must be > 0", offer_id=self.id)
        if self.price <= 0:
            raise OfferValidationError("price must be > 0", offer_id=self.id)
        if self.free_kilometers < 0:
            raise OfferValidationError("freeKilometers must be >= 0", offer_id=self.id)


@dataclass(frozen=True, slots=True)
class OfferSummary:
    """Public projection of an offer returned by searches."""

    id: str
    data: str


# ==============================================================================
# Search Parameters
# ==============================================================================


@dataclass(frozen=True, slots=True)
class OfferFilters:
    """
    Optional search filters.

    Every field is a no-op when it is None or zero (False for only_vollkasko).
    """

    min_number_seats: int | None = None
    min_price: int | None = None
    max_price: int | None = None  # exclusive
    car_type: CarType | None = None
    only_vollkasko: bool | None = None
    min_free_kilometer: int | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        for name in ("min_number_seats", "min_price", "max_price", "min_free_kilometer"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise FilterValidationError(f"{name} must be >= 0", field=name)


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 0  # zero-based
    page_size: int = 100

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 0:
            raise PagingValidationError("page must be >= 0")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")


@dataclass(frozen=True, slots=True)
class OfferSearchRequest:
    region_id: int
    time_range_start: int  # ms, inclusive
    time_range_end: int  # ms, inclusive
    number_days: int
    sort_order: SortOrder
    paging: Paging
    price_range_width: int
    min_free_kilometer_width: int
    filters: OfferFilters = field(default_factory=OfferFilters)

    @property
    def duration_ms(self) -> int:
        return self.number_days * MILLISECONDS_PER_DAY

    def validate(self) -> None:
        """
        Validate the complete search request.

        Raises:
            FilterValidationError: If search window or bucket widths are invalid
            PagingValidationError: If paging parameters are invalid
        """
        if self.number_days <= 0:
            raise FilterValidationError("number_days must be > 0")
        if self.price_range_width <= 0:
            raise FilterValidationError("price_range_width must be > 0")
        if self.min_free_kilometer_width <= 0:
            raise FilterValidationError("min_free_kilometer_width must be > 0")

        self.paging.validate()
        self.filters.validate()
