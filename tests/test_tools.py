"""Tests for the tool definitions published by tools/list."""

from __future__ import annotations

import json

from square_mcp.mcp.tools import build_tools

TOOLS = build_tools(["catalog", "customers", "payments"])


def test_exactly_three_tools():
    assert [t["name"] for t in TOOLS] == ["make_api_request", "get_type_info", "get_service_info"]


def test_tool_structure():
    """Every tool must have a name, description and an object input schema."""
    for tool in TOOLS:
        assert tool["description"], f"tool {tool['name']} missing description"
        schema = tool["inputSchema"]
        assert schema["type"] == "object", f"tool {tool['name']} schema not object"
        assert "properties" in schema, f"tool {tool['name']} missing properties"


def test_required_fields_subset_of_properties():
    for tool in TOOLS:
        schema = tool["inputSchema"]
        missing = set(schema["required"]) - set(schema["properties"])
        assert not missing, f"tool {tool['name']}: required fields {missing} not in properties"


def test_required_arguments():
    required = {t["name"]: t["inputSchema"]["required"] for t in TOOLS}
    assert required == {
        "make_api_request": ["service", "method"],
        "get_type_info": ["service", "method"],
        "get_service_info": ["service"],
    }


def test_request_is_optional_object():
    props = TOOLS[0]["inputSchema"]["properties"]
    assert props["request"]["type"] == "object"


def test_make_api_request_lists_services():
    assert TOOLS[0]["description"].endswith("Available services: catalog, customers, payments.")


def test_tools_json_serializable():
    s = json.dumps(TOOLS)
    assert len(s) > 100
