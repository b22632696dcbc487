import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional


def utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def new_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class RunLogger:
    """
    Append-only JSONL run logger.

    One JSON object per line in log_path. run_id identifies the process (server
    or CLI invocation); request_id identifies a single compose call within it.
    Nothing reads this file back; it is a diagnostic trail only.
    """
    log_path: Path
    run_id: str = field(default_factory=new_id)

    def _event(self, agent: str, request_id: str, event: str, status: str, **payload: Any) -> None:
        record = {
            "ts": utc_iso(),
            "run_id": self.run_id,
            "request_id": request_id,
            "agent": agent,
            "event": event,
            "status": status,
        }
        record.update(payload)

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")

    def start(self, agent: str, request_id: str, input: Any) -> None:
        self._event(agent, request_id, "start", "ok", input=input)

    def end(self, agent: str, request_id: str, output: Any, metrics: Optional[dict[str, Any]] = None) -> None:
        self._event(agent, request_id, "end", "ok", output=output, metrics=metrics or {})

    def error(self, agent: str, request_id: str, input: Any, err: Exception) -> None:
        self._event(
            agent,
            request_id,
            "error",
            "error",
            input=input,
            error={"type": err.__class__.__name__, "message": str(err)},
        )
