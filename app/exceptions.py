from typing import Any, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message, reported as the ``error`` field
        detail: optional extra context (driver message, offending input)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "SERVICE_ERROR"

    def __init__(self, message: str = "Service error", detail: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload

    def __str__(self) -> str:
        return self.message


class ValidationError(ServiceError):
    """Raised when a required field is missing from a request. http_status is 400."""

    http_status = 400
    default_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", detail: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message, detail, code)


class InvalidDate(ValidationError):
    """Raised when a date-like input cannot be normalized to YYYY-MM-DD.

    The original input is kept on ``value`` and reported as ``detail``.
    """

    default_code = "INVALID_DATE"

    def __init__(self, value: Any):
        super().__init__(f"Invalid date: {value}", detail=repr(value) if not isinstance(value, str) else value)
        self.value = value


class StoreError(ServiceError):
    """Raised when the persistence layer fails (connectivity, constraint, timeout).

    http_status is 500; ``detail`` carries the driver message.
    """

    http_status = 500
    default_code = "STORE_ERROR"

    def __init__(self, message: str = "store failed", detail: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message, detail, code)
