from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from lib.env import load_env


DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PUBLIC_WS_URL = "wss://yt-description-writer-agt.replit.app"


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    environment: str = "development"
    public_ws_url: str = DEFAULT_PUBLIC_WS_URL
    run_log_path: Optional[Path] = None

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def websocket_url(self) -> str:
        if self.is_production:
            return self.public_ws_url
        return f"ws://localhost:{self.port}"


def _port(raw: str | None) -> int:
    if not (raw or "").strip():
        return DEFAULT_PORT
    try:
        port = int(raw)  # type: ignore[arg-type]
    except ValueError as e:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Reads .env first when called without an explicit mapping.
    """
    if environ is None:
        load_env()
        environ = os.environ

    run_log = (environ.get("RUN_LOG_PATH") or "").strip()

    return Settings(
        host=(environ.get("HOST") or DEFAULT_HOST).strip(),
        port=_port(environ.get("PORT")),
        environment=(environ.get("REPLIT_ENVIRONMENT") or "development").strip().lower(),
        public_ws_url=(environ.get("PUBLIC_WS_URL") or DEFAULT_PUBLIC_WS_URL).strip(),
        run_log_path=Path(run_log) if run_log else None,
    )
