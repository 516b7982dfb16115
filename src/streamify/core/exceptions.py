"""Custom exceptions for the application."""

from typing import Any, Optional


class StreamifyException(Exception):
    """Base exception for all Streamify errors answered to the client."""
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        extra: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.extra = extra or {}
        super().__init__(self.message)


# Request Exceptions
class ValidationError(StreamifyException):
    """Invalid input data."""
    def __init__(self, message: str, extra: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=400, extra=extra)


class ConflictError(StreamifyException):
    """Resource already exists."""
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


# Authentication Exceptions
class InvalidCredentialsError(StreamifyException):
    """Invalid email or password."""
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, status_code=401)


class UnauthorizedError(StreamifyException):
    """Missing or invalid credential."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=401)


class ForbiddenError(StreamifyException):
    """Authenticated but not allowed."""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status_code=403)


# Resource Exceptions
class ResourceNotFoundError(StreamifyException):
    """Resource not found."""
    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class ConfigurationError(StreamifyException):
    """Server-side configuration is missing."""
    def __init__(self, message: str):
        super().__init__(message, status_code=500)


# Startup Exceptions
class DatabaseConnectionError(Exception):
    """MongoDB could not be reached at startup."""
    def __init__(self, uri_host: str, reason: str):
        self.uri_host = uri_host
        self.reason = reason
        super().__init__(f"Failed to connect to MongoDB at {uri_host}: {reason}")


class PipelineError(Exception):
    """Request pipeline misconfigured or assembled twice."""


class DuplicateRouteError(PipelineError):
    """Same verb and path registered twice under one prefix."""
    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"Route {method} {path} is already registered")
