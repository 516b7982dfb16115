"""The default request pipeline of the Streamify API."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware import Middleware

from ..context import AppContext
from ..core.exceptions import StreamifyException
from ..pipeline import PipelineStage, RequestPipeline, StageKind
from . import routes_auth, routes_chat, routes_system, routes_users
from .errors import (
    not_found_handler,
    request_validation_handler,
    streamify_exception_handler,
    unhandled_exception_handler,
)
from .frontend import frontend_build_present, mount_frontend
from .middleware import (
    AllowedOriginCORSMiddleware,
    CookieParserMiddleware,
    ErrorResponderMiddleware,
    RequestLoggingMiddleware,
)


def install_cors(app: FastAPI, context: AppContext) -> None:
    app.add_middleware(
        AllowedOriginCORSMiddleware,
        allow_origins=[context.settings.allowed_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Cookie"],
        expose_headers=["Set-Cookie"],
    )


def install_json_body(app: FastAPI, context: AppContext) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)


def install_cookies(app: FastAPI, context: AppContext) -> None:
    app.add_middleware(CookieParserMiddleware)


def install_request_logging(app: FastAPI, context: AppContext) -> None:
    app.add_middleware(RequestLoggingMiddleware)


def install_routes(app: FastAPI, context: AppContext) -> None:
    # Routers define their own prefixes (/auth, /users, /chat),
    # so we mount them once under /api.
    app.include_router(routes_auth.router, prefix="/api")
    app.include_router(routes_users.router, prefix="/api")
    app.include_router(routes_chat.router, prefix="/api")
    app.include_router(routes_system.router)


def install_service_info(app: FastAPI, context: AppContext) -> None:
    app.include_router(routes_system.info_router)


def install_frontend(app: FastAPI, context: AppContext) -> None:
    mount_frontend(app, context.settings.FRONTEND_DIST_DIR)


def install_not_found(app: FastAPI, context: AppContext) -> None:
    app.add_exception_handler(StarletteHTTPException, not_found_handler)


def install_errors(app: FastAPI, context: AppContext) -> None:
    app.add_exception_handler(StreamifyException, streamify_exception_handler)
    # Innermost, so 500s pass back through CORS and request logging
    app.user_middleware.append(Middleware(ErrorResponderMiddleware))
    # Last resort for failures in the outer middleware itself
    app.add_exception_handler(Exception, unhandled_exception_handler)


def default_pipeline() -> RequestPipeline:
    """CORS, parsing, logging, routes, frontend, 404, errors - in that order."""
    return RequestPipeline(
        [
            PipelineStage("cors", StageKind.MIDDLEWARE, install_cors),
            PipelineStage("json_body", StageKind.HANDLER, install_json_body),
            PipelineStage("cookies", StageKind.MIDDLEWARE, install_cookies),
            PipelineStage("request_logging", StageKind.MIDDLEWARE, install_request_logging),
            PipelineStage("routes", StageKind.ROUTES, install_routes),
            PipelineStage(
                "service_info",
                StageKind.ROUTES,
                install_service_info,
                condition=lambda settings: settings.is_development,
            ),
            PipelineStage(
                "frontend",
                StageKind.ROUTES,
                install_frontend,
                condition=frontend_build_present,
            ),
            PipelineStage("not_found", StageKind.HANDLER, install_not_found),
            PipelineStage("errors", StageKind.HANDLER, install_errors),
        ]
    )
