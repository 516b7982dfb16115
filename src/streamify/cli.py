"""Command line entry point: run the API with its own listener."""

import argparse
from typing import Optional, Sequence

import uvicorn
from loguru import logger

from . import __version__
from .config import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="streamify", description="Run the Streamify API server")
    parser.add_argument("--host", default=settings.HOST, help="Bind address (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port (default: %(default)s)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the server.

    uvicorn runs the lifespan (database connection) before binding the port,
    so a MongoDB failure stops the process before it accepts traffic.
    """
    args = build_parser().parse_args(argv)
    logger.info(f"Starting Streamify API on {args.host}:{args.port}")
    uvicorn.run(
        "streamify.asgi:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=get_settings().log_level.lower(),
    )


if __name__ == "__main__":
    main()
