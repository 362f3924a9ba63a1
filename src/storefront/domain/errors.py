"""Domain error classes.

Protocol-agnostic errors that represent business and collaborator failures.
These errors are translated to appropriate formats (HTTP status, UI banner) by adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains error information that can be shown
    verbatim by a presentation layer or translated to HTTP.
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
    """Input validation error.

    Examples:
        - Checkout form with missing or malformed fields
        - Non-positive product identifier
        - Checkout of an empty cart

    Protocol mappings:
        - REST: 422 Unprocessable Entity
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
                   Example: [{"field": "email", "message": "Email is invalid"}]
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

    def field_errors(self) -> dict[str, str]:
        """Per-field error map (field name -> message) for form rendering."""
        return {error["field"]: error["message"] for error in self.errors or []}

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


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Product with ID not found in the remote catalog

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Product")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class NetworkError(DomainError):
    """Transport failure talking to the remote catalog.

    Covers connection errors, timeouts and non-success HTTP statuses.
    The message is surfaced verbatim in the catalog's Failed state.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "NETWORK_ERROR"


class DecodeError(DomainError):
    """Remote catalog answered with a body that could not be decoded.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "DECODE_ERROR"
