"""
Test Suite for the MCP protocol surface

Drives CleanCodeReactService with raw JSON-RPC messages:
- initialize handshake and version negotiation
- tools/list and tools/call end to end
- resources
- malformed input
- the newline-delimited stdio loop
- process lifecycle and version lookup
"""

import asyncio
import json
import os
import subprocess
import sys
from importlib.metadata import PackageNotFoundError
from pathlib import Path

from clean_code_react import CleanCodeReactService, RegistryIntegrityError, Result, server
from clean_code_react import version as version_module
from clean_code_react.mcp_core import LATEST_PROTOCOL_VERSION, serve_stream
from clean_code_react.version import get_version

SRC = Path(__file__).resolve().parent / "src"


def rpc(service, method, params=None, req_id=1):
    message = {"jsonrpc": "2.0", "id": req_id, "method": method}
    if params is not None:
        message["params"] = params
    return asyncio.run(service.handle_message(json.dumps(message)))


def ready_service(**kwargs):
    service = CleanCodeReactService(**kwargs)
    rpc(service, "initialize", {"protocolVersion": LATEST_PROTOCOL_VERSION})
    assert rpc(service, "notifications/initialized", req_id=None) is None
    return service


def test_initialize():
    service = CleanCodeReactService()
    response = rpc(service, "initialize", {"protocolVersion": "2025-06-18"})

    result = response["result"]
    print(f"✅ initialize: {result['serverInfo']}")
    assert result["protocolVersion"] == "2025-06-18"
    assert result["serverInfo"] == {"name": "clean-code-react", "version": get_version()}
    assert "tools" in result["capabilities"]
    assert "resources" in result["capabilities"]


def test_initialize_negotiates_version():
    service = CleanCodeReactService()

    assert rpc(service, "initialize", {"protocolVersion": "2024-11-05"})["result"]["protocolVersion"] == "2024-11-05"
    assert rpc(service, "initialize", {"protocolVersion": "1999-01-01"})["result"]["protocolVersion"] == LATEST_PROTOCOL_VERSION


def test_requests_before_initialized_are_rejected():
    service = CleanCodeReactService()
    response = rpc(service, "tools/list")

    assert response["error"]["code"] == -32002
    assert rpc(service, "ping")["result"] == {}


def test_list_tools_end_to_end():
    service = ready_service()
    tools = rpc(service, "tools/list")["result"]["tools"]

    get_patterns = next(t for t in tools if t["name"] == "get_patterns")
    assert get_patterns["inputSchema"] == {"type": "object", "properties": {}}
    assert [t["name"] for t in tools] == ["get_patterns", "get_pattern", "get_code_quality_fundamentals"]


def test_call_tools_end_to_end():
    service = ready_service()

    result = rpc(service, "tools/call", {"name": "get_patterns"})["result"]
    patterns = json.loads(result["content"][0]["text"])["patterns"]
    assert len(patterns) == len(service._registry)

    result = rpc(service, "tools/call", {"name": "get_pattern", "arguments": {"patternId": "builder-pattern"}})["result"]
    pattern = json.loads(result["content"][0]["text"])["pattern"]
    assert pattern["id"] == "builder-pattern"
    assert len(pattern["examples"]) > 0

    result = rpc(service, "tools/call", {"name": "get_pattern", "arguments": {"patternId": "not-real"}})["result"]
    assert result["isError"] is True
    assert "not-real" in json.loads(result["content"][0]["text"])["error"]

    result = rpc(service, "tools/call", {"name": "get_code_quality_fundamentals"})["result"]
    principles = json.loads(result["content"][0]["text"])["principles"]
    for key in ("readability", "predictability", "cohesion", "coupling"):
        assert principles[key]["concepts"]


def test_unknown_tool_is_an_error_payload_not_a_protocol_error():
    service = ready_service()
    response = rpc(service, "tools/call", {"name": "does_not_exist"})

    assert "error" not in response
    assert response["result"]["isError"] is True
    assert "does_not_exist" in json.loads(response["result"]["content"][0]["text"])["error"]


def test_payload_is_pretty_printed():
    service = ready_service()
    text = rpc(service, "tools/call", {"name": "get_patterns"})["result"]["content"][0]["text"]

    assert text.startswith("{\n  ")


def test_resources():
    service = ready_service()

    resources = rpc(service, "resources/list")["result"]["resources"]
    assert [r["uri"] for r in resources] == ["res://quality_fundamentals"]

    templates = rpc(service, "resources/templates/list")["result"]["resourceTemplates"]
    assert [t["uriTemplate"] for t in templates] == ["res://pattern/{pattern_id}"]

    contents = rpc(service, "resources/read", {"uri": "res://pattern/render-props"})["result"]["contents"]
    assert contents[0]["mimeType"] == "application/json"
    assert json.loads(contents[0]["text"])["id"] == "render-props"

    response = rpc(service, "resources/read", {"uri": "res://pattern/nope"})
    assert response["error"]["code"] == -32002
    assert "nope" in response["error"]["message"]

    response = rpc(service, "resources/read", {"uri": "res://elsewhere"})
    assert response["error"]["code"] == -32002

    response = rpc(service, "resources/read", {})
    assert response["error"]["code"] == -32602


def test_read_resource_returns_result():
    service = CleanCodeReactService()
    read = asyncio.run(service.read_resource("res://quality_fundamentals"))

    assert isinstance(read, Result)
    assert read.is_ok()
    assert "principles" in json.loads(read.unwrap()["contents"][0]["text"])


def test_malformed_messages():
    service = ready_service()

    assert asyncio.run(service.handle_message("{not json"))["error"]["code"] == -32700
    assert asyncio.run(service.handle_message("[1, 2]"))["error"]["code"] == -32600
    assert asyncio.run(service.handle_message('{"id": 3, "method": "ping"}'))["error"]["code"] == -32600
    assert rpc(service, "no/such/method")["error"]["code"] == -32601


def test_stdio_loop():
    """Full session over the newline-delimited stream"""
    service = CleanCodeReactService()
    messages = [
        {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {"protocolVersion": "2025-03-26"}},
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        {"jsonrpc": "2.0", "id": 3, "method": "tools/call",
         "params": {"name": "get_pattern", "arguments": {"patternId": "strategy-pattern"}}},
    ]
    written = []

    async def session():
        reader = asyncio.StreamReader()
        for message in messages:
            reader.feed_data((json.dumps(message) + "\n").encode())
        reader.feed_data(b"\n")
        reader.feed_eof()
        await serve_stream(service, reader, written.append)

    asyncio.run(session())

    responses = [json.loads(line) for line in written]
    assert all(line.endswith("\n") and line.isascii() for line in written)
    assert [r["id"] for r in responses] == [1, 2, 3]
    assert responses[0]["result"]["protocolVersion"] == "2025-03-26"
    assert len(responses[1]["result"]["tools"]) == 3
    pattern = json.loads(responses[2]["result"]["content"][0]["text"])["pattern"]
    assert pattern["name"] == "Strategy Pattern"


def test_close_resets_initialization():
    service = ready_service()
    service.close()

    assert rpc(service, "tools/list")["error"]["code"] == -32002


def test_oversized_line_is_rejected_and_loop_continues():
    service = CleanCodeReactService()
    written = []

    async def session():
        reader = asyncio.StreamReader(limit=1024)
        big = {"jsonrpc": "2.0", "id": 1, "method": "ping", "params": {"pad": "x" * 4096}}
        reader.feed_data((json.dumps(big) + "\n").encode())
        reader.feed_data((json.dumps({"jsonrpc": "2.0", "id": 2, "method": "ping"}) + "\n").encode())
        reader.feed_eof()
        await serve_stream(service, reader, written.append)

    asyncio.run(session())

    responses = [json.loads(line) for line in written]
    assert responses[0]["id"] is None
    assert responses[0]["error"]["code"] == -32600
    assert responses[-1] == {"jsonrpc": "2.0", "id": 2, "result": {}}


def test_messages_without_id_get_no_response():
    service = ready_service()

    assert asyncio.run(service.handle_message('{"jsonrpc": "2.0", "method": "no/such/method"}')) is None
    assert asyncio.run(service.handle_message('{"jsonrpc": "2.0", "method": "tools/list"}')) is None
    assert rpc(service, "tools/list", req_id=None)["result"]["tools"]


# ===== process lifecycle =====

def run_module(stdin, **env):
    environ = dict(os.environ, **env)
    environ["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), environ.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "clean_code_react"],
        input=stdin, capture_output=True, env=environ, timeout=60,
    )


def test_process_exits_cleanly_on_eof():
    proc = run_module(b"")

    assert proc.returncode == 0, proc.stderr.decode(errors="replace")
    assert proc.stdout == b""


def test_process_survives_non_utf8_stdout():
    messages = [
        {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {"protocolVersion": LATEST_PROTOCOL_VERSION}},
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        {"jsonrpc": "2.0", "id": 2, "method": "tools/call",
         "params": {"name": "get_pattern", "arguments": {"patternId": "adapter-pattern"}}},
        {"jsonrpc": "2.0", "id": 3, "method": "ping"},
    ]
    stdin = "".join(json.dumps(m) + "\n" for m in messages).encode()

    proc = run_module(stdin, PYTHONIOENCODING="latin-1")

    assert proc.returncode == 0, proc.stderr.decode(errors="replace")
    responses = [json.loads(line) for line in proc.stdout.decode("ascii").splitlines()]
    assert [r["id"] for r in responses] == [1, 2, 3]
    pattern = json.loads(responses[1]["result"]["content"][0]["text"])["pattern"]
    assert pattern["id"] == "adapter-pattern"
    assert any(not ch.isascii() for ch in responses[1]["result"]["content"][0]["text"])


def test_boot_returns_1_when_startup_fails(monkeypatch, caplog):
    def broken(**kwargs):
        raise RegistryIntegrityError("Registry must contain at least one pattern")

    monkeypatch.setattr(server, "CleanCodeReactService", broken)

    assert server.boot() == 1
    assert "Server error" in caplog.text


def test_boot_returns_0_on_interrupt(monkeypatch):
    async def interrupted(svc):
        raise KeyboardInterrupt

    monkeypatch.setattr(server, "serve_stdio", interrupted)

    assert server.boot() == 0


def test_version_falls_back_without_metadata(monkeypatch):
    def missing(name):
        raise PackageNotFoundError(name)

    monkeypatch.setattr(version_module, "version", missing)
    get_version.cache_clear()
    try:
        assert get_version() == "0.0.0"
    finally:
        get_version.cache_clear()


def test_package_readme_is_the_usage_guide():
    pyproject = (SRC.parent / "pyproject.toml").read_text(encoding="utf-8")

    assert 'readme = "README.md"' in pyproject
    assert "get_pattern" in (SRC.parent / "README.md").read_text(encoding="utf-8")
