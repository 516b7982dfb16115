"""Streamify REST API.

Keep this package import side-effect free: importing `streamify.api.*` should
not build the FastAPI app.
"""

__all__ = ["create_app"]


def create_app(*args, **kwargs):
	from .main import create_app as _create_app

	return _create_app(*args, **kwargs)
