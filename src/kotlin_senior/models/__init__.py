"""Pydantic models for tool results returned by the dispatcher."""

from kotlin_senior.models.results import TextContent, ToolResult, text_result

__all__ = ["TextContent", "ToolResult", "text_result"]
