"""Tests for the stdio JSON-RPC tool server."""

from __future__ import annotations

import asyncio
import io
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from smartdocs.mcp import PROTOCOL_VERSION, TOOL_DEFINITIONS, DocsToolServer, JSONRPCErrorCode


@pytest.fixture
def server() -> DocsToolServer:
    return DocsToolServer()


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "index.js").write_text(
        "export function start() {}\n\nclass Queue {\n  push() {}\n}\n", encoding="utf-8"
    )
    return repo


def _call(server: DocsToolServer, name: str, arguments: Any) -> Dict[str, Any]:
    response = server.handle_message(
        {
            "jsonrpc": "2.0",
            "id": 7,
            "method": "tools/call",
            "params": {"name": name, "arguments": arguments},
        }
    )
    assert response is not None
    assert response["id"] == 7
    return response


def test_initialize_reports_protocol_and_tools_capability(server: DocsToolServer) -> None:
    response = server.handle_message({"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}})

    assert response is not None
    result = response["result"]
    assert result["protocolVersion"] == PROTOCOL_VERSION
    assert result["capabilities"] == {"tools": {}}
    assert result["serverInfo"]["name"] == "smartdocs"


def test_tools_list_exposes_four_tools(server: DocsToolServer) -> None:
    response = server.handle_message({"jsonrpc": "2.0", "id": 2, "method": "tools/list"})

    assert response is not None
    tools = response["result"]["tools"]
    assert [tool["name"] for tool in tools] == [
        "analyze_codebase",
        "generate_documentation",
        "detect_missing_docs",
        "suggest_improvements",
    ]
    for tool in tools:
        assert tool["inputSchema"]["required"] == ["rootPath"]
    assert TOOL_DEFINITIONS["analyze_codebase"]["inputSchema"]["properties"]["maxFiles"]["maximum"] == 5000


def test_analyze_codebase_returns_text_and_analysis(server: DocsToolServer, repo_path: Path) -> None:
    response = _call(server, "analyze_codebase", {"rootPath": str(repo_path)})

    result = response["result"]
    assert result["content"][0]["type"] == "text"
    assert result["content"][0]["text"].startswith("# Codebase analysis summary")
    analysis = result["_meta"]["analysis"]
    assert analysis["summary"]["totalEntities"] == 3
    assert [issue["name"] for issue in analysis["missingDocs"]] == ["start", "Queue", "push"]


@pytest.mark.parametrize(
    ("tool", "heading"),
    [
        ("generate_documentation", "# Smart Docs Report"),
        ("detect_missing_docs", "# Missing documentation"),
        ("suggest_improvements", "# Documentation improvement suggestions"),
    ],
)
def test_text_tools(server: DocsToolServer, repo_path: Path, tool: str, heading: str) -> None:
    response = _call(server, tool, {"rootPath": str(repo_path), "maxFiles": 1})

    content = response["result"]["content"]
    assert len(content) == 1
    assert content[0]["text"].startswith(heading)


def test_invalid_arguments_map_to_invalid_params(server: DocsToolServer) -> None:
    for arguments in ({"rootPath": ""}, {"rootPath": "src", "maxFiles": 0}, None, ["src"]):
        response = _call(server, "detect_missing_docs", arguments)
        assert response["error"]["code"] == JSONRPCErrorCode.INVALID_PARAMS.value


def test_unknown_tool_and_method(server: DocsToolServer) -> None:
    response = _call(server, "format_disk", {"rootPath": "/"})
    assert response["error"]["code"] == JSONRPCErrorCode.METHOD_NOT_FOUND.value

    response = server.handle_message({"jsonrpc": "2.0", "id": 3, "method": "resources/list"})
    assert response is not None
    assert response["error"]["code"] == JSONRPCErrorCode.METHOD_NOT_FOUND.value


def test_run_level_failure_maps_to_internal_error(server: DocsToolServer, tmp_path: Path) -> None:
    response = _call(server, "analyze_codebase", {"rootPath": str(tmp_path / "missing")})

    assert response["error"]["code"] == JSONRPCErrorCode.INTERNAL_ERROR.value
    assert "not found" in response["error"]["message"]


def test_notifications_get_no_response(server: DocsToolServer) -> None:
    assert server.handle_message({"jsonrpc": "2.0", "method": "notifications/initialized"}) is None


def test_handle_line_rejects_bad_json(server: DocsToolServer) -> None:
    response = server.handle_line("{not json")
    assert response is not None
    assert response["error"]["code"] == JSONRPCErrorCode.PARSE_ERROR.value

    response = server.handle_line("[1, 2]")
    assert response is not None
    assert response["error"]["code"] == JSONRPCErrorCode.INVALID_REQUEST.value


def test_run_processes_one_message_per_line(server: DocsToolServer) -> None:
    stdin = io.StringIO(
        "\n".join(
            [
                json.dumps({"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}}),
                json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}),
                "",
                json.dumps({"jsonrpc": "2.0", "id": 2, "method": "ping"}),
            ]
        )
        + "\n"
    )
    stdout = io.StringIO()

    asyncio.run(server.run(stdin=stdin, stdout=stdout))

    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert [response["id"] for response in responses] == [1, 2]
    assert responses[1]["result"] == {}
