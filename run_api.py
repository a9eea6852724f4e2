#!/usr/bin/env python
"""
Serve the CodeDetails API with uvicorn.

    python run_api.py                 # host/port from settings
    python run_api.py --reload        # development
    python run_api.py --port 9000 --log-level debug
"""

import argparse

import uvicorn

from shared.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CodeDetails API server")
    parser.add_argument("--host", help="Interface to bind (default: HOST setting)")
    parser.add_argument("--port", type=int, help="Port to bind (default: PORT setting)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Uvicorn log level (default: LOG_LEVEL setting)",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()
    settings = get_settings()

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=args.log_level or settings.log_level.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
