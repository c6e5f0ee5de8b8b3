"""Error hierarchy for the Fitness Tracker service layer.

Every error carries a stable ``code`` and the HTTP status the API layer
answers with. Lifecycle services raise them synchronously; only the monthly
report dispatcher catches ``DispatchError`` and keeps going.
"""

from typing import Any, Optional


class FitnessTrackerError(Exception):
    """Base exception for all Fitness Tracker errors."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> dict:
        """Convert to the JSON error envelope returned by the API."""
        error: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            error["details"] = self.details
        return {"error": error}


class ValidationError(FitnessTrackerError):
    """Malformed or missing input: blank fields, negative numbers, bad ranges."""

    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, message: str, issues: Optional[list[str]] = None):
        self.issues = issues or [message]
        super().__init__(message, details={"issues": self.issues})

    @classmethod
    def from_issues(cls, issues: list[str]) -> "ValidationError":
        """Build a single error out of every collected validation issue."""
        return cls("; ".join(issues), issues=issues)


class NotFoundError(FitnessTrackerError):
    """A referenced user, training or statistics identity does not resolve."""

    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ConflictError(FitnessTrackerError):
    """A uniqueness constraint would be violated."""

    code = "CONFLICT"
    http_status = 409


class PersistenceError(FitnessTrackerError):
    """The database failed unexpectedly during a write."""

    code = "PERSISTENCE_ERROR"
    http_status = 500


class DispatchError(FitnessTrackerError):
    """Sending a single notification failed."""

    code = "DISPATCH_ERROR"
    http_status = 502

    def __init__(self, message: str, recipient: Optional[str] = None):
        self.recipient = recipient
        super().__init__(message, details={"recipient": recipient} if recipient else None)
