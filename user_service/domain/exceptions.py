"""
Custom exception hierarchy for the user service.

Raised by use cases and the infrastructure layer, translated to HTTP
responses by the API controllers. All service exceptions inherit from
UserServiceError and carry a user-facing message.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldViolation:
    """One failed field rule."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationError(UserServiceError):
    """Raised when client input fails one or more field rules."""

    def __init__(self, violations: List[FieldViolation]):
        summary = "; ".join(f"{v.field}: {v.message}" for v in violations)
        super().__init__(
            f"Validation failed: {summary}",
            user_message="Invalid request data.",
            details={"errors": [v.to_dict() for v in violations]},
        )
        self.violations = list(violations)


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(UserServiceError):
    """Raised when an ID-addressed user does not exist."""

    def __init__(self, resource_id: str):
        super().__init__(
            f"User not found: {resource_id}",
            user_message="The ID does not exist in the database",
            details={"id": resource_id},
        )
        self.resource_id = resource_id


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


class StoreError(UserServiceError):
    """Raised when the persistence layer fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)
        self.operation = operation


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalFetchError(UserServiceError):
    """
    Raised when the random-user API call fails.

    ``status_code`` is the upstream HTTP status when the API answered with a
    non-success code, and None for transport or parse failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        kwargs.setdefault("user_message", "Error fetching data from the external API")
        super().__init__(message, **kwargs)
        self.status_code = status_code

