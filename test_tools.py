"""
Test Suite for the Clean Code React tools

This file exercises every tool through the dispatch boundary
(CleanCodeReactService.call_tool), the same path tools/call takes:
- get_patterns / get_pattern / get_code_quality_fundamentals
- invalid arguments, unknown ids and unknown tools
- handlers that fail unexpectedly
- per-pattern tools
"""

import asyncio
import json

from clean_code_react import CleanCodeReactService, Err
from clean_code_react.config import Settings
from clean_code_react.server import pattern_tool_name


def call(service, name, arguments=None):
    response = asyncio.run(service.call_tool(name, arguments))
    assert response["content"][0]["type"] == "text"
    return response, json.loads(response["content"][0]["text"])


def test_tool_descriptors():
    """tools/list order and schemas"""
    service = CleanCodeReactService()
    tools = {t["name"]: t for t in service._tools_list()}

    assert [t["name"] for t in service._tools_list()] == [
        "get_patterns", "get_pattern", "get_code_quality_fundamentals"]
    assert tools["get_patterns"]["inputSchema"] == {"type": "object", "properties": {}}
    assert tools["get_code_quality_fundamentals"]["inputSchema"] == {"type": "object", "properties": {}}

    schema = tools["get_pattern"]["inputSchema"]
    assert schema["type"] == "object"
    assert schema["required"] == ["patternId"]
    assert schema["properties"]["patternId"]["type"] == "string"
    assert "builder-pattern" in schema["properties"]["patternId"]["enum"]

    for tool in tools.values():
        assert tool["description"]
        assert "\n" not in tool["description"]


def test_get_patterns():
    service = CleanCodeReactService()
    response, payload = call(service, "get_patterns")

    print(f"✅ get_patterns(): {len(payload['patterns'])} patterns")
    assert "isError" not in response
    assert len(payload["patterns"]) == len(service._registry)
    for pattern in payload["patterns"]:
        assert set(pattern) == {"id", "name", "description", "whenToUse"}
    assert payload["usage"]["nextStep"]
    assert "get_pattern" in payload["usage"]["example"]


def test_get_patterns_ignores_arguments():
    service = CleanCodeReactService()
    _, plain = call(service, "get_patterns")
    _, with_args = call(service, "get_patterns", {"anything": 1})

    assert plain == with_args


def test_get_pattern():
    service = CleanCodeReactService()
    response, payload = call(service, "get_pattern", {"patternId": "builder-pattern"})

    print(f"✅ get_pattern('builder-pattern'): {payload['pattern']['name']}")
    assert "isError" not in response
    assert payload["pattern"]["id"] == "builder-pattern"
    assert payload["pattern"]["name"] == "Builder Pattern"
    assert len(payload["pattern"]["examples"]) > 0
    assert payload["pattern"]["examples"][0]["comparison"]["good"]["code"]


def test_get_pattern_works_for_every_listed_id():
    service = CleanCodeReactService()
    _, listing = call(service, "get_patterns")

    for pattern in listing["patterns"]:
        response, payload = call(service, "get_pattern", {"patternId": pattern["id"]})
        assert "isError" not in response
        assert payload["pattern"]["id"] == pattern["id"]
        assert payload["pattern"]["name"] == pattern["name"]


def test_get_pattern_unknown_id():
    service = CleanCodeReactService()
    response, payload = call(service, "get_pattern", {"patternId": "not-real"})

    print(f"✅ get_pattern('not-real'): {payload}")
    assert response["isError"] is True
    assert "not-real" in payload["error"]
    assert "not found" in payload["error"]


def test_get_pattern_invalid_arguments():
    service = CleanCodeReactService()

    response, payload = call(service, "get_pattern", {})
    assert response["isError"] is True
    assert payload["error"] == "Invalid arguments: patternId is required"

    response, payload = call(service, "get_pattern", {"patternId": 42})
    assert response["isError"] is True
    assert "patternId" in payload["error"]
    assert "string" in payload["error"]

    response, payload = call(service, "get_pattern", ["builder-pattern"])
    assert response["isError"] is True
    assert "expected an object" in payload["error"]

    # snake_case is not the wire name
    response, payload = call(service, "get_pattern", {"pattern_id": "builder-pattern"})
    assert response["isError"] is True


def test_unknown_tool():
    service = CleanCodeReactService()
    response, payload = call(service, "does_not_exist")

    assert response["isError"] is True
    assert payload == {"error": "Tool 'does_not_exist' not found"}


def test_code_quality_fundamentals():
    service = CleanCodeReactService()
    response, payload = call(service, "get_code_quality_fundamentals")

    assert "isError" not in response
    for key in ("readability", "predictability", "cohesion", "coupling"):
        assert len(payload["principles"][key]["concepts"]) > 0
    assert payload["overview"]


def test_results_are_deterministic():
    service = CleanCodeReactService()

    first = asyncio.run(service.call_tool("get_pattern", {"patternId": "factory-pattern"}))
    second = asyncio.run(service.call_tool("get_pattern", {"patternId": "factory-pattern"}))
    assert first == second


def test_unexpected_handler_failure_is_contained():
    class BrokenService(CleanCodeReactService):
        def explode(self) -> dict:
            """Always fails."""
            raise RuntimeError("boom")

    service = BrokenService()
    response, payload = call(service, "explode")

    assert response["isError"] is True
    assert payload["error"] == "Unexpected error while running tool 'explode'"


def test_async_handlers_are_awaited():
    class AsyncService(CleanCodeReactService):
        async def slow_patterns(self) -> dict:
            """Awaited before responding."""
            await asyncio.sleep(0)
            return {"count": len(self._registry)}

        def failing(self):
            """Returns an Err with a plain value."""
            return Err("plain failure")

    service = AsyncService()
    response, payload = call(service, "slow_patterns")
    assert payload == {"count": 12}

    response, payload = call(service, "failing")
    assert response["isError"] is True
    assert payload == {"error": "plain failure"}


def test_per_pattern_tools():
    service = CleanCodeReactService(settings=Settings(per_pattern_tools=True))

    names = service.tool_names
    assert names[:3] == ["get_patterns", "get_pattern", "get_code_quality_fundamentals"]
    assert "get_builder_pattern" in names
    assert "get_render_props_pattern" in names
    assert len(names) == 3 + len(service._registry)

    response, payload = call(service, "get_builder_pattern")
    assert "isError" not in response
    assert payload["pattern"]["id"] == "builder-pattern"

    descriptor = next(t for t in service._tools_list() if t["name"] == "get_strategy_pattern")
    assert descriptor["inputSchema"] == {"type": "object", "properties": {}}
    assert "Strategy Pattern" in descriptor["description"]


def test_per_pattern_tools_disabled_by_default():
    service = CleanCodeReactService(settings=Settings(per_pattern_tools=False))
    assert "get_builder_pattern" not in service.tool_names


def test_pattern_tool_name():
    assert pattern_tool_name("builder-pattern") == "get_builder_pattern"
    assert pattern_tool_name("render-props") == "get_render_props_pattern"
    assert pattern_tool_name("higher-order-component") == "get_higher_order_component_pattern"
