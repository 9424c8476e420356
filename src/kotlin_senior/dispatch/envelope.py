"""Wrap tool results and dispatch errors into the outward response shape."""

from __future__ import annotations

from typing import Any, Dict, List

from mcp import types

from kotlin_senior.dispatch.errors import ToolError
from kotlin_senior.models.results import ToolResult


def build_envelope(result: ToolResult) -> Dict[str, Any]:
    """Success envelope: ``{"content": [{"type": "text", "text": ...}, ...]}``."""
    return {"content": [item.model_dump() for item in result.content]}


def build_error_envelope(error: ToolError) -> Dict[str, Any]:
    """Failure envelope carrying the error's one-line message."""
    return {
        "content": [{"type": "text", "text": str(error)}],
        "isError": True,
    }


def to_mcp_content(result: ToolResult) -> List[types.TextContent]:
    """Content items as MCP SDK types for the transport."""
    return [types.TextContent(type="text", text=item.text) for item in result.content]


def to_mcp_result(result: ToolResult) -> types.CallToolResult:
    """Successful ``tools/call`` result for the transport."""
    return types.CallToolResult(content=to_mcp_content(result), isError=False)


def to_mcp_error_result(error: Exception) -> types.CallToolResult:
    """Failed ``tools/call`` result carrying the error's one-line message."""
    return types.CallToolResult(content=[types.TextContent(type="text", text=str(error))], isError=True)
