"""Tests for the bundled HelloTool."""

import json

from hellomcp.tools.hello import HelloTool


class TestHelloToolDescription:
    def test_name(self) -> None:
        assert HelloTool().name == "HelloTool"

    def test_schema(self) -> None:
        desc = HelloTool().describe()
        assert desc["name"] == "HelloTool"
        assert desc["description"] == "A tool that greets users"
        schema = desc["inputSchema"]
        assert schema["type"] == "object"
        assert set(schema["properties"]) == {"value", "birthday"}
        assert schema["required"] == ["value"]

    def test_describe_is_idempotent(self) -> None:
        tool = HelloTool()
        assert json.dumps(tool.describe()) == json.dumps(tool.describe())


class TestHelloToolCall:
    def test_greets_by_name(self) -> None:
        result = HelloTool().call(json.dumps({"value": "Ada"}))
        assert result == [{"type": "text", "text": "Hello Ada!"}]

    def test_birthday_is_mentioned(self) -> None:
        result = HelloTool().call(json.dumps({"value": "Ada", "birthday": "1815-12-10"}))
        assert result[0]["text"] == "Hello Ada (born on 1815-12-10)!"

    def test_empty_birthday_is_ignored(self) -> None:
        result = HelloTool().call(json.dumps({"value": "Ada", "birthday": ""}))
        assert result[0]["text"] == "Hello Ada!"

    def test_defaults_to_world(self) -> None:
        result = HelloTool().call("{}")
        assert result[0]["text"] == "Hello World!"

    def test_malformed_json(self) -> None:
        result = HelloTool().call("{not json")
        assert result == [{"type": "text", "text": "Error: Invalid arguments"}]

    def test_non_object_arguments(self) -> None:
        result = HelloTool().call("[1, 2]")
        assert result[0]["text"] == "Error: Invalid arguments"

    def test_wrong_value_type(self) -> None:
        result = HelloTool().call(json.dumps({"value": ["Ada"]}))
        assert result[0]["text"] == "Error: Invalid arguments"
