"""Error responders: validation, not-found and the centralized handler."""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import StreamifyException

AVAILABLE_ENDPOINTS = {
    "root": "/",
    "auth": "/api/auth",
    "users": "/api/users",
    "chat": "/api/chat",
    "health": "/health",
    "test": "/api/test",
}


def _target(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing JSON bodies become a 400 envelope."""
    errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors()]
    logger.debug(f"Invalid request body for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request body", "errors": errors},
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing misses become a structured envelope instead of a default page."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.warning(f"{exc.status_code} - Not Found: {request.method} {_target(request)}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "message": f"Cannot {request.method} {_target(request)}",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
            headers=getattr(exc, "headers", None),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def streamify_exception_handler(request: Request, exc: StreamifyException) -> JSONResponse:
    """Domain errors raised by controllers and the auth guard."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message, **exc.extra},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log with traceback, hide details outside development."""
    logger.opt(exception=exc).error(f"Error: {request.method} {request.url.path}")
    content = {"success": False, "message": "Something went wrong!"}
    if request.app.state.context.settings.is_development:
        content["error"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)
