"""ASGI entry point for external hosts (uvicorn, gunicorn, serverless).

The host owns the listening socket; MongoDB is connected in the app lifespan
before the first request is served.
"""

from .api.main import create_app
from .config import get_settings
from .core.logging import configure_logging

settings = get_settings()
configure_logging(settings)

app = create_app(settings)

__all__ = ["app"]
