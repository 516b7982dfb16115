"""Single-page frontend served from the production build."""

from pathlib import Path
from typing import Any, Dict, Tuple

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.routing import Match
from starlette.types import Scope

from ..config import Settings

ENTRY_DOCUMENT = "index.html"


def frontend_build_present(settings: Settings) -> bool:
    """True only in production with a build on disk; logs when it is missing."""
    if not settings.is_production:
        return False
    index = Path(settings.FRONTEND_DIST_DIR) / ENTRY_DOCUMENT
    if not index.is_file():
        logger.warning(f"Frontend build not found at {index}; serving API routes only")
        return False
    return True


class FrontendRoute(APIRoute):
    """Catch-all that only claims GET requests outside `/api`.

    Anything it declines falls through to the not-found responder instead
    of becoming a 405.
    """

    def matches(self, scope: Scope) -> Tuple[Match, Dict[str, Any]]:
        match, child_scope = super().matches(scope)
        if match is not Match.FULL:
            return Match.NONE, {}
        full_path = child_scope["path_params"].get("full_path", "")
        if full_path == "api" or full_path.startswith("api/"):
            return Match.NONE, {}
        return match, child_scope


def mount_frontend(app: FastAPI, dist_dir: Path) -> None:
    """Serve build files, falling back to the entry document for client routes.

    Must be called after all API routes are registered.
    """
    dist_root = Path(dist_dir).resolve()
    index = dist_root / ENTRY_DOCUMENT

    assets = dist_root / "assets"
    if assets.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets)), name="assets")

    async def serve_frontend(full_path: str):
        if full_path:
            candidate = (dist_root / full_path).resolve()
            if candidate.is_file() and dist_root in candidate.parents:
                return FileResponse(candidate)
        return FileResponse(index)

    app.router.add_api_route(
        "/{full_path:path}",
        serve_frontend,
        methods=["GET"],
        include_in_schema=False,
        route_class_override=FrontendRoute,
    )
    logger.info(f"Serving frontend from {dist_root}")
