"""End-to-end tests for MCPServer over in-memory stdio streams."""

from __future__ import annotations

import io
import json
from typing import Any

import pytest

from hellomcp.config import ServerSettings
from hellomcp.protocol.errors import ToolDescriptionError
from hellomcp.protocol.transport import StdioTransport
from hellomcp.server import MCPServer, create_default_server
from hellomcp.tools.hello import HelloTool
from hellomcp.tools.source import GetSourceCodeTool


def _run(server: MCPServer, *messages: Any) -> list[dict[str, Any]]:
    """Feed *messages* (dicts or raw strings) to *server* and return parsed output lines."""
    lines = [m if isinstance(m, str) else json.dumps(m) for m in messages]
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()

    server.run(StdioTransport(stdin, stdout))

    output = stdout.getvalue().splitlines()
    return [json.loads(line) for line in output]


def _greeting_server() -> MCPServer:
    server = MCPServer("GreetingServer")
    server.register_tool(HelloTool())
    return server


class TestMCPServerConstruction:
    def test_defaults(self) -> None:
        server = MCPServer("GreetingServer")
        assert server.server_info.name == "GreetingServer"
        assert server.server_info.version == "1.0.0"
        assert len(server.registry) == 0

    def test_custom_version(self) -> None:
        assert MCPServer("s", "2.3.4").server_info.version == "2.3.4"

    def test_name_required(self) -> None:
        with pytest.raises(ValueError, match="name"):
            MCPServer("")

    def test_register_tool_delegates_to_registry(self) -> None:
        server = MCPServer("s")
        tool = HelloTool()
        server.register_tool(tool)
        assert server.registry.get("HelloTool") is tool

    def test_from_settings(self) -> None:
        settings = ServerSettings(name="Custom", version="9.9.9", wrap_tool_results=True)
        server = MCPServer.from_settings(settings)
        assert server.server_info.name == "Custom"
        assert server.server_info.version == "9.9.9"


class TestMCPServerRun:
    def test_initialize_reports_identity(self) -> None:
        [response] = _run(
            _greeting_server(),
            {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}},
        )
        assert response["result"]["serverInfo"]["name"] == "GreetingServer"
        assert response["result"]["protocolVersion"] == "2024-11-05"

    def test_full_session(self) -> None:
        responses = _run(
            _greeting_server(),
            {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}},
            {"jsonrpc": "2.0", "method": "notifications/initialized"},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
            {
                "jsonrpc": "2.0",
                "id": 3,
                "method": "tools/call",
                "params": {"name": "HelloTool", "arguments": {"value": "Ada"}},
            },
        )

        assert [r["id"] for r in responses] == [1, 2, 3]
        assert responses[1]["result"]["tools"][0]["name"] == "HelloTool"
        assert "Hello Ada!" in responses[2]["result"]["content"][0]["text"]

    @pytest.mark.parametrize("method", ["notifications/initialized", "notifications/cancelled"])
    def test_notifications_produce_no_lines(self, method: str) -> None:
        responses = _run(
            _greeting_server(),
            {"jsonrpc": "2.0", "method": method},
            {"jsonrpc": "2.0", "method": method, "params": {"requestId": 1}},
        )
        assert len(responses) == 0

    def test_parse_error_then_continues(self) -> None:
        responses = _run(
            _greeting_server(),
            "{this is not json",
            {"jsonrpc": "2.0", "id": 7, "method": "tools/list"},
        )

        assert len(responses) == 2
        assert responses[0]["id"] is None
        assert responses[0]["error"]["code"] == -32700
        assert responses[1]["id"] == 7
        assert "result" in responses[1]

    def test_blank_lines_are_ignored(self) -> None:
        responses = _run(
            _greeting_server(),
            "",
            "   ",
            {"jsonrpc": "2.0", "id": 1, "method": "tools/list"},
        )
        assert len(responses) == 1

    def test_errors_do_not_stop_the_loop(self) -> None:
        responses = _run(
            _greeting_server(),
            {"jsonrpc": "2.0", "id": 1, "method": "resources/list"},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "Nope"}},
            "[]",
            {"jsonrpc": "2.0", "id": 3, "method": "initialize"},
        )

        assert [r.get("error", {}).get("code") for r in responses] == [-32601, -32602, -32600, None]
        assert responses[3]["id"] == 3

    def test_responses_follow_arrival_order(self) -> None:
        messages = [{"jsonrpc": "2.0", "id": i, "method": "tools/list"} for i in range(5)]
        responses = _run(_greeting_server(), *messages)
        assert [r["id"] for r in responses] == list(range(5))

    def test_empty_input_returns_cleanly(self) -> None:
        assert _run(_greeting_server()) == []

    def test_registered_tools_all_listed_once(self) -> None:
        server = _greeting_server()
        server.register_tool(GetSourceCodeTool())
        server.register_tool(HelloTool())

        [response] = _run(server, {"jsonrpc": "2.0", "id": 1, "method": "tools/list"})

        names = [t["name"] for t in response["result"]["tools"]]
        assert names == ["GetSourceCode", "HelloTool"]
        for entry in response["result"]["tools"]:
            tool = server.registry.get(entry["name"])
            assert tool is not None
            assert entry["inputSchema"] == tool.describe()["inputSchema"]

    def test_bad_description_fails_before_serving(self) -> None:
        class _Broken:
            name = "Broken"

            def describe(self) -> dict[str, Any]:
                return {"name": "Broken"}

            def call(self, arguments: str) -> list[dict[str, Any]]:
                return []

        server = MCPServer("s")
        server.register_tool(_Broken())
        stdout = io.StringIO()

        with pytest.raises(ToolDescriptionError):
            server.run(StdioTransport(io.StringIO('{"id":1,"method":"initialize"}\n'), stdout))
        assert stdout.getvalue() == ""

    def test_legacy_wrap_mode(self) -> None:
        server = MCPServer("GreetingServer", wrap_tool_results=True)
        server.register_tool(HelloTool())

        [response] = _run(
            server,
            {
                "jsonrpc": "2.0",
                "id": 1,
                "method": "tools/call",
                "params": {"name": "HelloTool", "arguments": {"value": "Ada"}},
            },
        )

        inner = response["result"]["content"][0]["text"]
        assert inner == [{"type": "text", "text": "Hello Ada!"}]


class TestMalformedInput:
    def test_undecodable_line_does_not_stop_the_loop(self) -> None:
        stdin = io.TextIOWrapper(
            io.BytesIO(
                b'{"jsonrpc":"2.0","id":1,"method":"tools/list"}\n'
                b"\xff\xfe garbage\n"
                b'{"jsonrpc":"2.0","id":2,"method":"initialize"}\n'
            ),
            encoding="utf-8",
        )
        stdout = io.StringIO()

        _greeting_server().run(StdioTransport(stdin, stdout))

        responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert [r["id"] for r in responses] == [1, None, 2]
        assert responses[1]["error"]["code"] == -32700
        assert responses[2]["result"]["serverInfo"]["name"] == "GreetingServer"

    def test_non_standard_json_constants_are_rejected(self) -> None:
        responses = _run(
            _greeting_server(),
            '{"jsonrpc":"2.0","id":NaN,"method":"initialize"}',
            '{"jsonrpc":"2.0","id":1,"method":"initialize","params":{"x":Infinity}}',
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        )

        assert [r["id"] for r in responses] == [None, None, 2]
        assert [r["error"]["code"] for r in responses[:2]] == [-32700, -32700]


class TestCreateDefaultServer:
    def test_bundled_tools(self) -> None:
        server = create_default_server()
        assert server.server_info.name == "GreetingServer"
        assert server.registry.names() == ["GetSourceCode", "HelloTool"]

    def test_settings_applied(self, tmp_path: Any) -> None:
        source = tmp_path / "notes.md"
        source.write_text("# notes\n", encoding="utf-8")
        settings = ServerSettings(name="Other", source_path=str(source))

        server = create_default_server(settings)

        [response] = _run(
            server,
            {"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {"name": "GetSourceCode"}},
        )
        resource = response["result"]["content"][0]["resource"]
        assert server.server_info.name == "Other"
        assert resource["mimeType"] == "text/markdown"
        assert resource["text"] == "# notes\n"
