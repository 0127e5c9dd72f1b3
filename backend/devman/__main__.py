"""Command-line entry point.

Usage:
    devman [--host HOST] [--port PORT] [--reload]
    python -m devman [options]
"""

import argparse

import uvicorn

from devman import __version__
from devman.core import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="devman", description="Device Manager API server")
    parser.add_argument(
        "--host", default=settings.host, help=f"Bind address (default: {settings.host})"
    )
    parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Listen port (default: {settings.port})"
    )
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    # Request logging is done by the app middleware
    uvicorn.run(
        "devman.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        access_log=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
