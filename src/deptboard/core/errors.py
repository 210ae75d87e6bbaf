"""
Exceptions for deptboard.

Exception Hierarchy:
    DeptboardError (base)
    ├── ApiError (non-success response or transport failure)
    └── ConfigError (invalid configuration)

Example:
    >>> from deptboard.core.errors import ApiError
    >>> try:
    ...     raise ApiError(404, "not found")
    ... except ApiError as e:
    ...     print(e)
    API Error: 404 not found
"""


class DeptboardError(Exception):
    """
    Base exception for all deptboard errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ApiError(DeptboardError):
    """
    Exception for a failed REST call.

    Raised when the backend answers with a non-2xx status, carrying the raw
    status code and response body text. Transport failures (connection
    refused, DNS errors) are raised with ``status_code=None`` and the httpx
    exception preserved as ``__cause__``.

    Attributes:
        status_code: HTTP status code, or None if no response arrived
        body: Raw response body text (or the transport error text)
    """

    def __init__(self, status_code: int | None, body: str) -> None:
        if status_code is None:
            message = f"API Error: {body}"
        else:
            message = f"API Error: {status_code} {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigError(DeptboardError):
    """Exception for configuration that fails validation."""


__all__ = [
    "DeptboardError",
    "ApiError",
    "ConfigError",
]
