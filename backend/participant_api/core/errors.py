"""Error Hierarchy — typed, categorized exceptions for all service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - Client errors (400-level) never imply a write; store errors (500-level) are logged
    - to_response() produces the REST envelope {"error": ...[, "details": ...]}
    - details is only populated where the endpoint exposes store failures verbatim

Design Decisions:
    - Single hierarchy with ParticipantServiceError base: one global handler catches all
    - CollectionOperationError is infrastructure-facing; the service layer converts it
      into StoreFailureError carrying the endpoint's public message
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


class ParticipantServiceError(Exception):
    """Base exception for all Participant Record Service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class ParticipantValidationError(ParticipantServiceError):
    """Request payload missing a field or carrying a malformed value."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.field = field


class ParticipantNotFoundError(ParticipantServiceError):
    """No VISIBLE participant matches the requested email."""
    def __init__(self, email: str):
        super().__init__(
            "Participant not found or is deleted",
            "PARTICIPANT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.email = email


class UnauthorizedError(ParticipantServiceError):
    """Authorization gate rejected the request."""
    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION, 401,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class CollectionOperationError(ParticipantServiceError):
    """Any failure of the underlying collection: driver, connectivity, timeout."""
    def __init__(self, message: str, operation: str, timed_out: bool = False):
        super().__init__(
            f"Collection {operation} failed: {message}",
            "COLLECTION_ERROR",
            ErrorCategory.TIMEOUT if timed_out else ErrorCategory.DATABASE,
            500,
        )
        self.operation = operation
        self.timed_out = timed_out


class StoreFailureError(ParticipantServiceError):
    """Endpoint-level store failure; message is the public one for that endpoint."""
    def __init__(self, message: str, details: str | None = None):
        super().__init__(
            message, "STORE_FAILURE", ErrorCategory.DATABASE, 500, details,
        )
