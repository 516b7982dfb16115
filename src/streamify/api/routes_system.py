"""Health, smoke-test and service metadata endpoints."""

from fastapi import Depends

from .. import __version__
from ..schemas import HealthResponse
from .dependencies import get_settings
from .errors import AVAILABLE_ENDPOINTS
from .registrar import RouteRegistrar

registrar = RouteRegistrar(tags=["system"])
router = registrar.router

info_registrar = RouteRegistrar(tags=["system"])
info_router = info_registrar.router


@registrar.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe."""
    return HealthResponse()


@registrar.get("/api/test")
async def api_test():
    return {"message": "API is working!"}


@info_registrar.get("/")
async def service_info(settings=Depends(get_settings)):
    """Service metadata (development only)."""
    endpoints = {k: v for k, v in AVAILABLE_ENDPOINTS.items() if k != "root"}
    return {
        "message": "Welcome to Streamify API",
        "status": "running",
        "version": __version__,
        "environment": settings.NODE_ENV,
        "endpoints": endpoints,
    }
