from typing import Any, Optional


class ChefKitError(Exception):
    """Base class for errors that map onto an HTTP response.

    Attributes:
        message: human-readable message
        details: optional underlying error text or mapping with extra context
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"
    default_code = "INTERNAL_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Any] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"success": False, "message": self.message}
        payload["error"] = self.details if self.details is not None else self.code
        return payload

    def __str__(self) -> str:
        return self.message


class DatabaseUnavailableError(ChefKitError):
    """Raised when the database connection has not been established."""

    http_status = 503
    default_message = "Database not ready"
    default_code = "DATABASE_UNAVAILABLE"


class NotFoundError(ChefKitError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class OperationFailedError(ChefKitError):
    """Raised when a database operation fails unexpectedly.

    ``details`` carries the driver's message so callers can see what went wrong.
    """

    http_status = 500
    default_message = "Operation failed"
    default_code = "OPERATION_FAILED"
