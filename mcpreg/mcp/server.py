"""MCP server for mcpreg - exposes the registry and config commands as MCP tools over stdio."""

import io
import json
import sys
from typing import Any

from ..api.config.McpregConfig import McpregConfig
from ..utils.get_logger import get_logger
from ..utils.get_package_version import get_package_version
from .call_tool import call_tool
from .tools import TOOLS
from .UnknownToolError import UnknownToolError

logger = get_logger("mcp.server")

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "mcpreg"


class MCPServer:
    """Simple JSON-RPC server for MCP tools."""

    def __init__(
        self,
        *,
        input_stream: Any | None = None,
        output_stream: Any | None = None,
        config: McpregConfig | None = None,
    ):
        self._input = input_stream or sys.stdin.buffer
        self._output = output_stream or sys.stdout
        self._config = config
        self._lsp_mode = False

    @staticmethod
    def define_tools() -> list[dict[str, Any]]:
        """Tool metadata for tools/list."""
        return [
            {"name": name, "description": spec.description, "inputSchema": spec.input_schema}
            for name, spec in TOOLS.items()
        ]

    def _read_body(self, length: int) -> str:
        """Read a framed payload of ``length`` UTF-8 bytes."""
        if not isinstance(self._input, io.TextIOBase):
            return self._input.read(length).decode("utf-8")
        # Text streams count characters, so stop once the encoded size is reached.
        chars: list[str] = []
        size = 0
        while size < length:
            char = self._input.read(1)
            if not char:
                break
            chars.append(char)
            size += len(char.encode("utf-8"))
        return "".join(chars)

    def read_message(self) -> dict[str, Any] | None:
        """Read and decode a single JSON-RPC message from the input stream.

        Accepts newline-delimited JSON or Content-Length framed payloads on
        either a binary or a text stream. Returns None at end of input.
        Undecodable messages are logged and skipped.
        """
        while True:
            raw = self._input.readline()
            if not raw:
                return None
            try:
                line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
                # Skip blank lines (common after framed LSP payloads).
                if not line.strip():
                    continue
                if line.strip().lower().startswith("content-length"):
                    length = int(line.split(":", 1)[1].strip())
                    while True:
                        sep = self._input.readline()
                        if not sep or not sep.strip():
                            break
                    self._lsp_mode = True
                    message = json.loads(self._read_body(length))
                else:
                    message = json.loads(line)
            except ValueError as e:
                logger.warning("Skipping malformed message: %s", e)
                continue
            if isinstance(message, dict):
                return message
            logger.warning("Skipping non-object message: %r", message)

    def write_message(self, message: dict[str, Any]) -> None:
        """Write a JSON-RPC response to the output stream."""
        payload = json.dumps(message)
        if self._lsp_mode:
            encoded = payload.encode("utf-8")
            self._output.write(f"Content-Length: {len(encoded)}\r\n\r\n{payload}")
        else:
            self._output.write(payload)
            self._output.write("\n")
        self._output.flush()

    def _reply(self, request_id: Any, result: dict[str, Any]) -> None:
        self.write_message({"jsonrpc": "2.0", "id": request_id, "result": result})

    def _error(self, request_id: Any, code: int, message: str) -> None:
        self.write_message({"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}})

    def handle_request(self, message: dict[str, Any]) -> None:
        """Handle a single JSON-RPC request. Notifications (no id) get no reply."""
        request_id, method, params = message.get("id"), message.get("method"), message.get("params")
        if params is None:
            params = {}
        if request_id is None:
            logger.debug("Notification %s", method)
            return

        if method == "initialize":
            self._reply(
                request_id,
                {
                    "protocolVersion": PROTOCOL_VERSION,
                    "capabilities": {"tools": {}},
                    "serverInfo": {"name": SERVER_NAME, "version": get_package_version()},
                },
            )
        elif method == "ping":
            self._reply(request_id, {})
        elif method == "tools/list":
            self._reply(request_id, {"tools": self.define_tools()})
        elif method == "tools/call":
            if not isinstance(params, dict):
                self._error(request_id, -32602, "Invalid params: params must be an object")
                return
            tool_name, arguments = params.get("name"), params.get("arguments")
            logger.info("Calling tool %s", tool_name)
            try:
                payload = call_tool(tool_name, arguments, self._config)
            except UnknownToolError as e:
                logger.warning("%s", e)
                self._error(request_id, -32601, str(e))
                return
            except Exception as e:
                logger.exception("Tool %s crashed", tool_name)
                self._error(request_id, -32603, f"Tool execution failed: {e}")
                return
            self._reply(
                request_id,
                {"content": [{"type": "text", "text": json.dumps(payload, indent=2, ensure_ascii=False)}]},
            )
        else:
            self._error(request_id, -32601, f"Method not found: {method}")

    def run(self) -> None:
        """Run the request loop until EOF."""
        logger.info("mcpreg MCP server running on stdio")
        while True:
            message = self.read_message()
            if message is None:
                break
            try:
                self.handle_request(message)
            except Exception as e:
                logger.exception("Request %r failed", message.get("method"))
                if message.get("id") is not None:
                    self._error(message["id"], -32603, f"Internal error: {e}")
        logger.info("mcpreg MCP server stopped")
