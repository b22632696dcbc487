"""JSON-RPC 2.0 dispatcher for the description writer.

Methods:
  - ping        -> server status
  - tools/list  -> tool catalog
  - tools/call  -> runs writeDescription and returns {"content": <result>}

Errors never escape `handle_message`: every input produces one response envelope.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

from agents.description_agent import DescriptionWriterAgent
from agents.errors import InvalidInput
from app_logging.run_logger import utc_iso
from server.tool_catalog import WRITE_DESCRIPTION_TOOL, list_tools


SERVER_NAME = "YT-Description-Writer"
SERVER_VERSION = "1.0.0"
CAPABILITIES = ["youtube", "description", "seo", "content"]

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def rpc_result(result: Any, id: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "result": result, "id": id}


def rpc_error(code: int, message: str, id: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": id}


class RpcDispatcher:
    def __init__(
        self,
        agent: Optional[DescriptionWriterAgent] = None,
        log: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.agent = agent or DescriptionWriterAgent()
        self.log = log or (lambda message: None)

    def handle_message(self, message: str | bytes) -> dict[str, Any]:
        """Decode one raw frame and dispatch it."""
        try:
            payload = json.loads(message)
        except (TypeError, ValueError):
            self.log("Error processing message: invalid JSON")
            return rpc_error(PARSE_ERROR, "Parse error", None)
        return self.handle_request(payload)

    def handle_request(self, payload: Any) -> dict[str, Any]:
        if not isinstance(payload, dict):
            self.log("Received: None")
            return rpc_error(PARSE_ERROR, "Parse error", None)

        method = payload.get("method")
        id = payload.get("id")
        self.log(f"Received: {method}")

        if method == "ping":
            return rpc_result(self.ping(), id)
        if method == "tools/list":
            return rpc_result({"tools": list_tools()}, id)
        if method == "tools/call":
            return self._call_tool(payload.get("params"), id)

        return rpc_error(METHOD_NOT_FOUND, f"Method not found: {method}", id)

    def ping(self) -> dict[str, Any]:
        return {
            "status": "ok",
            "agent": SERVER_NAME,
            "version": SERVER_VERSION,
            "capabilities": list(CAPABILITIES),
            "timestamp": utc_iso(),
        }

    def _call_tool(self, params: Any, id: Any) -> dict[str, Any]:
        if not isinstance(params, dict):
            return rpc_error(INVALID_PARAMS, "Invalid params", id)

        name = params.get("name")
        if name != WRITE_DESCRIPTION_TOOL:
            return rpc_error(INVALID_PARAMS, f"Unknown tool: {name}", id)

        args = params.get("arguments")
        try:
            result = self.agent.run(args if args is not None else {})
        except InvalidInput as e:
            return rpc_error(INVALID_PARAMS, str(e), id)
        except Exception as e:
            return rpc_error(INTERNAL_ERROR, str(e), id)

        return rpc_result({"content": result}, id)
