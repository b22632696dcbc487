from __future__ import annotations

import argparse
import sys
from dataclasses import replace

import uvicorn

from lib.settings import settings_from_env
from server.app import create_app
from server.rpc import SERVER_NAME


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run the YouTube description writer JSON-RPC server")
    ap.add_argument("--host", default=None, help="Bind address (defaults to HOST or 0.0.0.0)")
    ap.add_argument("--port", type=int, default=None, help="Port (defaults to PORT or 3000)")
    args = ap.parse_args(argv)

    settings = settings_from_env()
    if args.host:
        settings = replace(settings, host=args.host)
    if args.port:
        settings = replace(settings, port=args.port)

    app = create_app(settings)

    print(f"{SERVER_NAME} server running on port {settings.port}")
    if settings.is_production:
        print(f"Published WebSocket URL: {settings.websocket_url()}")
    else:
        print(f"Dev WebSocket URL: {settings.websocket_url()}")
    if settings.run_log_path:
        print(f"Run log: {settings.run_log_path}")

    # uvicorn installs its own SIGINT/SIGTERM handlers for graceful shutdown.
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
