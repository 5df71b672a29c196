"""Error body schemas, used to document non-2xx responses in OpenAPI.

Every error the API returns has the same shape: a message, a stable code and,
for validation failures, a list of per-field problems.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One field-level problem inside a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "sortBy",
                "message": "Must be one of: price, year, mileage, brand, model, seatingCapacity",
                "code": "INVALID_SORT_FIELD",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Lookup miss:
            {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"}

        Rejected search parameters:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "minPrice", "message": "...", "code": "INVALID_RANGE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
                {"detail": "Username already exists", "code": "CONFLICT"},
                {"detail": "Not authenticated", "code": "UNAUTHORIZED"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "minPrice",
                            "message": "Must be less than or equal to maxPrice",
                            "code": "INVALID_RANGE",
                        },
                    ],
                },
            ]
        }
    )
