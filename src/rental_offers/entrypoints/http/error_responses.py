"""REST API error response models.

Every non-2xx response from /api/offers uses ErrorResponse.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error: which input failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "pageSize",
                "message": "Input should be greater than or equal to 1",
                "code": "greater_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Conflict:
            {
                "detail": "Offer IDs already exist",
                "code": "CONFLICT"
            }

        Invalid query:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "sortOrder",
                        "message": "Input should be 'price-asc' or 'price-desc'",
                        "code": "literal_error"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Offer IDs already exist", "code": "CONFLICT"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "regionID",
                            "message": "Field required",
                            "code": "missing",
                        },
                        {
                            "field": "carType",
                            "message": "Input should be 'small', 'sports', 'luxury' or 'family'",
                            "code": "literal_error",
                        },
                    ],
                },
            ]
        }
    )
