"""
Tool invoker: resolve a tool by name, validate its arguments, run its handler.

Handlers are pure and synchronous, so failures are never retried; they are
raised to the transport, which reports them for the single request.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

import structlog

from kotlin_senior.dispatch.errors import ToolError, UnknownToolError
from kotlin_senior.dispatch.registry import ToolDescriptor, ToolRegistry
from kotlin_senior.dispatch.validation import validate_arguments
from kotlin_senior.models.results import ToolResult

logger = structlog.get_logger(__name__)


class InvocationPhase(str, Enum):
    """Phase an invocation was in when it finished."""

    RESOLVING = "resolving"
    VALIDATING = "validating"
    EXECUTING = "executing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ToolInvoker:
    """Dispatches calls against a fixed ToolRegistry."""

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> Tuple[ToolDescriptor, ...]:
        """Descriptors for discovery, in registration order."""
        return self._registry.descriptors()

    def invoke(self, name: str, arguments: Optional[Any]) -> ToolResult:
        """
        Run the tool ``name`` with raw ``arguments``.

        Raises UnknownToolError, MissingArgumentsError or ValidationError;
        handler exceptions propagate unchanged.
        """
        phase = InvocationPhase.RESOLVING
        try:
            tool = self._registry.get(name)
            if tool is None:
                raise UnknownToolError(name)

            phase = InvocationPhase.VALIDATING
            args = validate_arguments(tool.descriptor, arguments)

            phase = InvocationPhase.EXECUTING
            result = tool.handler(args)
        except ToolError as e:
            logger.warning("tool_invocation_failed", tool=name, phase=phase.value, error=str(e))
            raise
        except Exception:
            logger.exception("tool_handler_crashed", tool=name, phase=phase.value)
            raise
        logger.info(
            "tool_invoked",
            tool=name,
            phase=InvocationPhase.SUCCEEDED.value,
            content_items=len(result.content),
        )
        return result
