"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP, GraphQL, gRPC) by protocol adapters.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Error kinds a ship operation can be rejected with.

    The value doubles as the ``error_code`` of the matching error class.
    """

    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    NOT_FOUND = "NOT_FOUND"


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP, GraphQL, or gRPC formats.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Used for domain invariant violations and field-level validation.

    Examples:
        - Ship name longer than 50 characters
        - Ship id that is not a positive integer
        - Invalid paging parameters

    Protocol mappings:
        - REST: 422 Unprocessable Entity
        - GraphQL: 200 OK with errors array
        - gRPC: INVALID_ARGUMENT (3)
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "speed", "message": "Incorrect Ship.speed"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""


class MissingRequiredFieldError(ValidationError):
    """A ship is created without one of its required fields.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = ErrorKind.MISSING_REQUIRED_FIELD.value

    def __init__(self, fields: list[str], **context: Any) -> None:
        """Create a missing field error.

        Args:
            fields: Names of the required fields that were absent
            **context: Additional context
        """
        self.fields = list(fields)
        super().__init__(
            "One of Ship params is null",
            errors=[
                {"field": field, "message": "Field is required", "code": self.error_code}
                for field in self.fields
            ],
            **context,
        )

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.MISSING_REQUIRED_FIELD


class InvalidFieldValueError(ValidationError):
    """A ship field violates its range or length constraint.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = ErrorKind.INVALID_FIELD_VALUE.value

    def __init__(self, field: str, message: str, **context: Any) -> None:
        """Create an invalid field error.

        Args:
            field: Name of the offending field (e.g., "speed")
            message: Reason, e.g. "Incorrect Ship.speed"
            **context: Additional context
        """
        self.field = field
        super().__init__(
            message,
            errors=[{"field": field, "message": message, "code": self.error_code}],
            **context,
        )

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.INVALID_FIELD_VALUE


class InvalidIdentifierError(ValidationError):
    """A ship identifier is not a positive integer.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = ErrorKind.INVALID_IDENTIFIER.value

    def __init__(self, identifier: Any, **context: Any) -> None:
        self.identifier = identifier
        super().__init__(
            "Ship id must be a positive integer",
            errors=[
                {
                    "field": "id",
                    "message": f"Must be a positive integer: {identifier}",
                    "code": self.error_code,
                }
            ],
            **context,
        )

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.INVALID_IDENTIFIER


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Ship with ID not found
        - Ship deleted by a concurrent request

    Protocol mappings:
        - REST: 404 Not Found
        - GraphQL: 200 OK with errors array (or null field)
        - gRPC: NOT_FOUND (5)
    """

    error_code: str = ErrorKind.NOT_FOUND.value

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Ship")
            identifier: Resource identifier (e.g., database ID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.NOT_FOUND
