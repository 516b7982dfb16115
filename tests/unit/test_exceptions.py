"""Unit tests for exception hierarchy."""

from streamify.core.exceptions import (
    ConfigurationError,
    ConflictError,
    DatabaseConnectionError,
    DuplicateRouteError,
    ForbiddenError,
    InvalidCredentialsError,
    PipelineError,
    ResourceNotFoundError,
    StreamifyException,
    UnauthorizedError,
    ValidationError,
)


def test_streamify_exception_base():
    exc = StreamifyException("test error", status_code=418, extra={"key": "value"})
    assert exc.message == "test error"
    assert exc.status_code == 418
    assert exc.extra == {"key": "value"}
    assert str(exc) == "test error"


def test_status_codes():
    assert ValidationError("bad").status_code == 400
    assert ConflictError("exists").status_code == 400
    assert InvalidCredentialsError().status_code == 401
    assert UnauthorizedError().status_code == 401
    assert ForbiddenError().status_code == 403
    assert ResourceNotFoundError("User not found").status_code == 404
    assert ConfigurationError("missing").status_code == 500


def test_validation_error_extra():
    exc = ValidationError("All fields are required", extra={"missingFields": ["bio"]})
    assert exc.extra == {"missingFields": ["bio"]}


def test_database_connection_error():
    exc = DatabaseConnectionError("mongo.internal", "timed out")
    assert exc.uri_host == "mongo.internal"
    assert "mongo.internal" in str(exc)
    assert "timed out" in str(exc)


def test_exception_inheritance():
    assert issubclass(InvalidCredentialsError, StreamifyException)
    assert issubclass(ResourceNotFoundError, StreamifyException)
    assert issubclass(DuplicateRouteError, PipelineError)
    assert not issubclass(DatabaseConnectionError, StreamifyException)
