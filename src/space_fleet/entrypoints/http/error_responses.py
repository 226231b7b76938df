"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "speed",
                "message": "Incorrect Ship.speed",
                "code": "INVALID_FIELD_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)
    - Error codes for i18n (code field can be used for translation keys)

    Examples:
        Simple error:
            {
                "detail": "Ship with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field details:
            {
                "detail": "One of Ship params is null",
                "code": "MISSING_REQUIRED_FIELD",
                "errors": [
                    {
                        "field": "planet",
                        "message": "Field is required",
                        "code": "MISSING_REQUIRED_FIELD"
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
                {"detail": "Ship with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Incorrect Ship.speed",
                    "code": "INVALID_FIELD_VALUE",
                    "errors": [
                        {
                            "field": "speed",
                            "message": "Incorrect Ship.speed",
                            "code": "INVALID_FIELD_VALUE",
                        }
                    ],
                },
            ]
        }
    )
