"""Wire models for /api/offers.

Field names are the camelCase names used on the wire (query parameters and
JSON keys), so no aliasing is involved.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CarTypeLiteral = Literal["small", "sports", "luxury", "family"]
SortOrderLiteral = Literal["price-asc", "price-desc"]


# ==============================================================================
# Requests
# ==============================================================================


class OfferDTO(BaseModel):
    """A rental offer as submitted by POST /api/offers."""

    ID: str = Field(description="Unique offer identifier", examples=["01934a57-7988-7879-bb9b-e03bd4e77b9d"])
    data: str = Field(description="Opaque payload returned unchanged by searches")
    mostSpecificRegionID: int = Field(description="Leaf region the offer is located in", examples=[3])
    startDate: int = Field(description="Rental start, ms since epoch", examples=[1732104000000])
    endDate: int = Field(description="Rental end, ms since epoch", examples=[1732449600000])
    numberSeats: int = Field(examples=[5])
    price: int = Field(description="Price in cents", examples=[12999])
    carType: CarTypeLiteral
    hasVollkasko: bool
    freeKilometers: int = Field(examples=[250])


class CreateOffersRequestDTO(BaseModel):
    offers: list[OfferDTO]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "offers": [
                    {
                        "ID": "01934a57-7988-7879-bb9b-e03bd4e77b9d",
                        "data": "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA==",
                        "mostSpecificRegionID": 3,
                        "startDate": 1732104000000,
                        "endDate": 1732449600000,
                        "numberSeats": 5,
                        "price": 12999,
                        "carType": "family",
                        "hasVollkasko": True,
                        "freeKilometers": 250,
                    }
                ]
            }
        }
    )


class OffersSearchQueryDTO(BaseModel):
    """Query parameters for GET /api/offers."""

    regionID: int = Field(description="Region to search; parent regions include all leaves below")
    timeRangeStart: int = Field(description="Window start, ms since epoch (inclusive)")
    timeRangeEnd: int = Field(description="Window end, ms since epoch (inclusive)")
    numberDays: int = Field(description="Exact rental length in days", ge=1)
    sortOrder: SortOrderLiteral = Field(description="Price sort direction")
    page: int = Field(description="Zero-based page index", ge=0)
    pageSize: int = Field(description="Offers per page", ge=1)
    priceRangeWidth: int = Field(description="Bucket width of the price histogram", ge=1)
    minFreeKilometerWidth: int = Field(description="Bucket width of the free-kilometer histogram", ge=1)
    minNumberSeats: int | None = Field(default=None, ge=0)
    minPrice: int | None = Field(default=None, description="Inclusive lower price bound", ge=0)
    maxPrice: int | None = Field(default=None, description="Exclusive upper price bound", ge=0)
    carType: CarTypeLiteral | None = None
    onlyVollkasko: bool | None = None
    minFreeKilometer: int | None = Field(default=None, ge=0)


# ==============================================================================
# Responses
# ==============================================================================


class OfferSummaryDTO(BaseModel):
    ID: str
    data: str


class RangeDTO(BaseModel):
    start: int
    end: int
    count: int


class CarTypeCountsDTO(BaseModel):
    small: int
    sports: int
    luxury: int
    family: int


class SeatsCountDTO(BaseModel):
    numberSeats: int
    count: int


class VollkaskoCountDTO(BaseModel):
    trueCount: int
    falseCount: int


class OffersSearchResponseDTO(BaseModel):
    offers: list[OfferSummaryDTO]
    priceRanges: list[RangeDTO]
    carTypeCounts: CarTypeCountsDTO
    seatsCount: list[SeatsCountDTO]
    freeKilometerRange: list[RangeDTO]
    vollkaskoCount: VollkaskoCountDTO
