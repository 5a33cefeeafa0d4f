"""Custom exceptions shared across the request pipeline."""

from dataclasses import dataclass


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for pipeline failures.

    ``code`` identifies the failure kind; ``status_code`` is the HTTP status
    returned to the caller.
    """

    message: str
    code: str = "service_error"
    status_code: int = 500

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class MissingFieldError(ServiceError):
    """Raised when the request field is absent or not a string."""

    message: str = "Invalid input provided"
    code: str = "missing_field"
    status_code: int = 400


@dataclass(eq=False)
class EmptyFieldError(ServiceError):
    """Raised when the request field is blank after trimming."""

    message: str = "Input cannot be empty"
    code: str = "empty_field"
    status_code: int = 400


@dataclass(eq=False)
class ConfigurationError(ServiceError):
    """Raised when the provider credential is not configured."""

    message: str = "Gemini API key not configured"
    code: str = "configuration_error"


@dataclass(eq=False)
class ProviderUnavailableError(ServiceError):
    """Raised when the provider answers with a non-success status."""

    code: str = "provider_unavailable"
    provider_status: int | None = None
    provider_body: str | None = None


@dataclass(eq=False)
class MalformedProviderResponseError(ServiceError):
    """Raised when the provider response lacks the candidate/parts nesting."""

    message: str = "Malformed provider response"
    code: str = "malformed_provider_response"


@dataclass(eq=False)
class EmptyGenerationError(ServiceError):
    """Raised when the provider generated only whitespace."""

    message: str = "Empty generation"
    code: str = "empty_generation"


@dataclass(eq=False)
class ProviderRequestError(ServiceError):
    """Raised when the provider could not be reached at all."""

    message: str = "Internal server error"
    code: str = "internal_error"
