"""Tool registry, argument validation, invocation and response envelopes."""

from kotlin_senior.dispatch.envelope import (
    build_envelope,
    build_error_envelope,
    to_mcp_content,
    to_mcp_error_result,
    to_mcp_result,
)
from kotlin_senior.dispatch.errors import (
    FieldError,
    MissingArgumentsError,
    ToolError,
    UnknownToolError,
    ValidationError,
)
from kotlin_senior.dispatch.invoker import InvocationPhase, ToolInvoker
from kotlin_senior.dispatch.registry import RegisteredTool, ToolDescriptor, ToolHandler, ToolRegistry
from kotlin_senior.dispatch.validation import validate_arguments

__all__ = [
    "FieldError",
    "InvocationPhase",
    "MissingArgumentsError",
    "RegisteredTool",
    "ToolDescriptor",
    "ToolError",
    "ToolHandler",
    "ToolInvoker",
    "ToolRegistry",
    "UnknownToolError",
    "ValidationError",
    "build_envelope",
    "build_error_envelope",
    "to_mcp_content",
    "to_mcp_error_result",
    "to_mcp_result",
    "validate_arguments",
]
