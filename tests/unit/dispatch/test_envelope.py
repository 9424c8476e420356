"""Unit tests for response envelopes."""

from mcp import types

from kotlin_senior.dispatch.envelope import (
    build_envelope,
    build_error_envelope,
    to_mcp_content,
    to_mcp_error_result,
    to_mcp_result,
)
from kotlin_senior.dispatch.errors import FieldError, MissingArgumentsError, UnknownToolError, ValidationError
from kotlin_senior.models.results import TextContent, ToolResult, text_result


class TestBuildEnvelope:
    def test_success_shape(self) -> None:
        assert build_envelope(text_result("hello")) == {"content": [{"type": "text", "text": "hello"}]}

    def test_preserves_item_order(self) -> None:
        result = ToolResult(content=[TextContent(text="a"), TextContent(text="b")])
        assert [c["text"] for c in build_envelope(result)["content"]] == ["a", "b"]

    def test_empty_result(self) -> None:
        assert build_envelope(ToolResult()) == {"content": []}


class TestBuildErrorEnvelope:
    def test_unknown_tool_message(self) -> None:
        envelope = build_error_envelope(UnknownToolError("x"))
        assert envelope["isError"] is True
        assert envelope["content"] == [{"type": "text", "text": "Unknown tool: x"}]

    def test_validation_message_names_field(self) -> None:
        error = ValidationError("generate_design_pattern", [FieldError("context", "field required")])
        text = build_error_envelope(error)["content"][0]["text"]
        assert text == "Invalid arguments for tool 'generate_design_pattern': context: field required"


class TestToMcpContent:
    def test_converts_to_sdk_types(self) -> None:
        content = to_mcp_content(text_result("hi"))
        assert len(content) == 1
        assert isinstance(content[0], types.TextContent)
        assert content[0].type == "text"
        assert content[0].text == "hi"


class TestMcpResults:
    def test_success_result(self) -> None:
        result = to_mcp_result(text_result("ok"))
        assert isinstance(result, types.CallToolResult)
        assert result.isError is False
        assert result.content[0].text == "ok"

    def test_error_result(self) -> None:
        result = to_mcp_error_result(MissingArgumentsError("check_best_practices"))
        assert result.isError is True
        assert result.content[0].text == "No arguments provided for tool 'check_best_practices'"
