"""Stdio JSON-RPC 2.0 tool server.

Reads one JSON-RPC message per line from stdin and writes one response per
line to stdout. Implements the ``initialize``, ``tools/list`` and
``tools/call`` methods used by MCP-compatible clients.
"""

from __future__ import annotations

import asyncio
import json
import sys
from enum import Enum
from typing import Any, Callable, Dict, Optional, TextIO

from . import __version__
from .errors import ConfigError, InvalidArgumentError
from .logging import get_logger
from .operations import DocsService
from .requests import MAX_FILES_LIMIT, AnalysisRequest, parse_request

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "smartdocs"

INSTRUCTIONS = (
    "Analyzes a codebase to report documentation coverage, list undocumented "
    "entities and suggest improvements. Tools: analyze_codebase, "
    "generate_documentation, detect_missing_docs, suggest_improvements."
)


class JSONRPCErrorCode(Enum):
    """Standard JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


def _input_schema(root_description: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "rootPath": {"type": "string", "minLength": 1, "description": root_description},
            "maxFiles": {
                "type": "integer",
                "minimum": 1,
                "maximum": MAX_FILES_LIMIT,
                "description": "Maximum number of files to analyze (default: unlimited)",
            },
            "excludePatterns": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Glob-like path patterns to exclude",
            },
        },
        "required": ["rootPath"],
    }


TOOL_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "analyze_codebase": {
        "name": "analyze_codebase",
        "title": "Analyze codebase",
        "description": "Analyze code structure and documentation status under a path.",
        "inputSchema": _input_schema("Root path to analyze"),
    },
    "generate_documentation": {
        "name": "generate_documentation",
        "title": "Generate documentation",
        "description": "Generate a markdown documentation report from the analysis.",
        "inputSchema": _input_schema("Root path of the codebase to document"),
    },
    "detect_missing_docs": {
        "name": "detect_missing_docs",
        "title": "Detect missing docs",
        "description": "List undocumented functions, classes and methods with severities.",
        "inputSchema": _input_schema("Root path to analyze"),
    },
    "suggest_improvements": {
        "name": "suggest_improvements",
        "title": "Suggest improvements",
        "description": "Suggest prioritized documentation improvements.",
        "inputSchema": _input_schema("Root path to analyze"),
    },
}


class DocsToolServer:
    """Routes JSON-RPC messages to :class:`DocsService` operations."""

    def __init__(self, service: DocsService | None = None) -> None:
        self.service = service or DocsService()
        self.logger = get_logger("mcp")
        self._handlers: Dict[str, Callable[[AnalysisRequest], Dict[str, Any]]] = {
            "analyze_codebase": self._analyze_codebase,
            "generate_documentation": self._text_tool(self.service.generate_documentation),
            "detect_missing_docs": self._text_tool(self.service.detect_missing_docs),
            "suggest_improvements": self._text_tool(self.service.suggest_improvements),
        }

    def handle_message(self, message: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Return the response for ``message``; notifications get no response."""
        method = message.get("method")
        message_id = message.get("id")

        if not isinstance(method, str):
            return _error(message_id, JSONRPCErrorCode.INVALID_REQUEST, "Missing method")

        if method.startswith("notifications/"):
            return None

        if method == "initialize":
            return _result(
                message_id,
                {
                    "protocolVersion": PROTOCOL_VERSION,
                    "capabilities": {"tools": {}},
                    "serverInfo": {"name": SERVER_NAME, "version": __version__},
                    "instructions": INSTRUCTIONS,
                },
            )

        if method == "ping":
            return _result(message_id, {})

        if method == "tools/list":
            return _result(message_id, {"tools": list(TOOL_DEFINITIONS.values())})

        if method == "tools/call":
            params = message.get("params") or {}
            return self._call_tool(params.get("name"), params.get("arguments"), message_id)

        return _error(message_id, JSONRPCErrorCode.METHOD_NOT_FOUND, f"Unknown method: {method}")

    def _call_tool(self, tool_name: Any, arguments: Any, message_id: Any) -> Dict[str, Any]:
        handler = self._handlers.get(tool_name) if isinstance(tool_name, str) else None
        if handler is None:
            return _error(message_id, JSONRPCErrorCode.METHOD_NOT_FOUND, f"Unknown tool: {tool_name}")

        if arguments is not None and not isinstance(arguments, dict):
            return _error(message_id, JSONRPCErrorCode.INVALID_PARAMS, "'arguments' must be an object")

        try:
            request = parse_request(arguments)
            return _result(message_id, handler(request))
        except InvalidArgumentError as exc:
            return _error(message_id, JSONRPCErrorCode.INVALID_PARAMS, str(exc))
        except (NotADirectoryError, FileNotFoundError, ConfigError) as exc:
            self.logger.error("%s failed: %s", tool_name, exc)
            return _error(message_id, JSONRPCErrorCode.INTERNAL_ERROR, str(exc))
        except Exception as exc:
            self.logger.exception("Unexpected error in %s", tool_name)
            return _error(message_id, JSONRPCErrorCode.INTERNAL_ERROR, f"Internal error: {exc}")

    def _analyze_codebase(self, request: AnalysisRequest) -> Dict[str, Any]:
        result, text = self.service.analyze(request)
        return {
            "content": [{"type": "text", "text": text}],
            "_meta": {"analysis": result.to_dict()},
        }

    @staticmethod
    def _text_tool(operation: Callable[[AnalysisRequest], str]) -> Callable[[AnalysisRequest], Dict[str, Any]]:
        def _handler(request: AnalysisRequest) -> Dict[str, Any]:
            return {"content": [{"type": "text", "text": operation(request)}]}

        return _handler

    def handle_line(self, line: str) -> Optional[Dict[str, Any]]:
        """Decode one input line and dispatch it."""
        try:
            message = json.loads(line)
        except json.JSONDecodeError as exc:
            self.logger.error("Invalid JSON: %s", exc)
            return _error(None, JSONRPCErrorCode.PARSE_ERROR, "Parse error")
        if not isinstance(message, dict):
            return _error(None, JSONRPCErrorCode.INVALID_REQUEST, "Request must be an object")
        return self.handle_message(message)

    async def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Serve requests until EOF on stdin."""
        reader = stdin or sys.stdin
        writer = stdout or sys.stdout
        loop = asyncio.get_running_loop()
        self.logger.info("Starting smartdocs tool server")

        while True:
            line = await loop.run_in_executor(None, reader.readline)
            if not line:
                self.logger.info("EOF detected, shutting down")
                break
            line = line.strip()
            if not line:
                continue

            response = await loop.run_in_executor(None, self.handle_line, line)
            if response is not None:
                writer.write(json.dumps(response) + "\n")
                writer.flush()


def _result(message_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": message_id, "result": result}


def _error(message_id: Any, code: JSONRPCErrorCode, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": message_id, "error": {"code": code.value, "message": message}}


def serve_stdio() -> None:  # pragma: no cover - integration path
    asyncio.run(DocsToolServer().run())


__all__ = ["DocsToolServer", "JSONRPCErrorCode", "TOOL_DEFINITIONS", "serve_stdio"]
