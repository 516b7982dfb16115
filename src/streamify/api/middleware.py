"""HTTP middleware stages: CORS, cookie decoding, request logging and errors."""

from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import cookie_parser
from starlette.types import Receive, Scope, Send

from .errors import unhandled_exception_handler


class AllowedOriginCORSMiddleware(CORSMiddleware):
    """CORS that answers foreign origins without any CORS headers.

    Starlette adds `Access-Control-Allow-Credentials` to every response it
    touches, rejected preflights included; only the allowed origin may see it.
    Requests without an `Origin` header are left to Starlette.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            headers = Headers(scope=scope)
            origin = headers.get("origin")
            if origin is not None and not self.is_allowed_origin(origin):
                if scope["method"] == "OPTIONS" and "access-control-request-method" in headers:
                    response = PlainTextResponse("Disallowed CORS origin", status_code=400)
                    await response(scope, receive, send)
                else:
                    # Processed as usual; the browser enforces the policy
                    await self.app(scope, receive, send)
                return
        await super().__call__(scope, receive, send)


class CookieParserMiddleware(BaseHTTPMiddleware):
    """Decode the Cookie header into `request.state.cookies`."""

    async def dispatch(self, request: Request, call_next):
        request.state.cookies = cookie_parser(request.headers.get("cookie", ""))
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method and path of every request."""

    async def dispatch(self, request: Request, call_next):
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.info(f"{request.method} {target}")
        return await call_next(request)


class ErrorResponderMiddleware(BaseHTTPMiddleware):
    """Turn unhandled exceptions into the 500 envelope.

    Installed innermost, inside the CORS layer, so error responses keep
    their CORS headers.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            return await unhandled_exception_handler(request, e)
