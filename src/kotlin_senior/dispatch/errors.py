"""
Errors raised by the tool dispatcher.

All of them are reported back to the caller as a failed response for the
request that caused them; none of them stops the server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence


class ToolError(Exception):
    """Base class for dispatch errors. ``str(error)`` is a one-line, user-facing message."""

    def __init__(self, message: str, tool_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.tool_name = tool_name

    def __str__(self) -> str:
        return self.message


class UnknownToolError(ToolError):
    """Requested tool name is not in the registry."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}", tool_name=tool_name)


class MissingArgumentsError(ToolError):
    """The arguments payload is absent for a tool that requires one."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"No arguments provided for tool '{tool_name}'", tool_name=tool_name)


@dataclass(frozen=True)
class FieldError:
    """One violated field constraint."""

    field: str
    problem: str

    def __str__(self) -> str:
        return f"{self.field}: {self.problem}"


class ValidationError(ToolError):
    """Arguments do not match the tool's declared input shape."""

    def __init__(self, tool_name: str, errors: Sequence[FieldError]) -> None:
        self.errors: List[FieldError] = list(errors)
        details = "; ".join(str(e) for e in self.errors) or "invalid arguments"
        super().__init__(f"Invalid arguments for tool '{tool_name}': {details}", tool_name=tool_name)

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields, in report order."""
        return [e.field for e in self.errors]
