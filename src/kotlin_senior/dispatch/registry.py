"""
Tool registry: static descriptors and the handlers bound to them.

The registry is built once from an explicit, ordered list of tools and is
read-only afterwards. Lookup misses return None instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Type

from pydantic import BaseModel

from kotlin_senior.models.results import ToolResult

ToolHandler = Callable[[Any], ToolResult]


def _strip_titles(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Drop pydantic's generated ``title`` keys from a model schema and its properties."""
    cleaned = {k: v for k, v in schema.items() if k != "title"}
    props = cleaned.get("properties")
    if isinstance(props, dict):
        cleaned["properties"] = {
            name: {k: v for k, v in prop.items() if k != "title"} for name, prop in props.items()
        }
    return cleaned


@dataclass(frozen=True)
class ToolDescriptor:
    """Static metadata advertised for one tool."""

    name: str
    description: str
    input_model: Type[BaseModel]

    @property
    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema of the tool's arguments (field -> type, enum, description; plus required)."""
        schema = _strip_titles(self.input_model.model_json_schema(by_alias=True))
        schema.setdefault("type", "object")
        schema.setdefault("required", [])
        return schema

    def to_dict(self) -> Dict[str, Any]:
        """Discovery representation: name, description, inputSchema."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass(frozen=True)
class RegisteredTool:
    """A descriptor and the handler that computes its result from validated arguments."""

    descriptor: ToolDescriptor
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Ordered, immutable mapping from tool name to RegisteredTool."""

    def __init__(self, tools: Iterable[RegisteredTool]) -> None:
        entries: Dict[str, RegisteredTool] = {}
        for tool in tools:
            if tool.name in entries:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            entries[tool.name] = tool
        self._entries = entries
        self._descriptors: Tuple[ToolDescriptor, ...] = tuple(t.descriptor for t in entries.values())

    def descriptors(self) -> Tuple[ToolDescriptor, ...]:
        """All descriptors in registration order."""
        return self._descriptors

    def get(self, name: str) -> Optional[RegisteredTool]:
        """Exact-match lookup; None when the name is not registered."""
        return self._entries.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._entries.values())
