"""Streamify - REST backend for a language-exchange chat app."""

__version__ = "1.0.0"

__all__ = ["create_app"]


def create_app(*args, **kwargs):
    from .api.main import create_app as _create_app

    return _create_app(*args, **kwargs)
