from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse

from agents.description_agent import DescriptionWriterAgent
from app_logging.run_logger import RunLogger, utc_iso
from lib.settings import Settings, settings_from_env
from server.rpc import SERVER_NAME, SERVER_VERSION, RpcDispatcher


def _log(message: str) -> None:
    print(f"[{utc_iso()}] {message}", flush=True)


def build_dispatcher(settings: Settings) -> RpcDispatcher:
    run_logger = RunLogger(log_path=settings.run_log_path) if settings.run_log_path else None
    return RpcDispatcher(DescriptionWriterAgent(run_logger=run_logger), log=_log)


def create_app(settings: Optional[Settings] = None, dispatcher: Optional[RpcDispatcher] = None) -> FastAPI:
    """FastAPI app exposing the JSON-RPC dispatcher over WebSocket (/) and HTTP (/rpc)."""
    settings = settings or settings_from_env()
    dispatcher = dispatcher or build_dispatcher(settings)

    app = FastAPI(title=SERVER_NAME, version=SERVER_VERSION)
    app.state.settings = settings
    app.state.dispatcher = dispatcher

    @app.websocket("/")
    async def rpc_socket(ws: WebSocket) -> None:
        await ws.accept()
        _log("Client connected")
        try:
            while True:
                message = await ws.receive_text()
                await ws.send_json(dispatcher.handle_message(message))
        except WebSocketDisconnect:
            _log("Client disconnected")

    @app.post("/rpc")
    async def rpc_http(request: Request) -> JSONResponse:
        body = await request.body()
        return JSONResponse(dispatcher.handle_message(body))

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return dispatcher.ping()

    return app
