"""Pydantic models for the uniform tool result: an ordered list of content items."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A single text content item."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = Field(default="text", description="Content kind tag.")
    text: str = Field(..., description="Text payload (markdown).")


class ToolResult(BaseModel):
    """Result of one tool invocation."""

    model_config = ConfigDict(frozen=True)

    content: List[TextContent] = Field(default_factory=list, description="Ordered content items.")

    @property
    def text(self) -> str:
        """All text items joined by newlines."""
        return "\n".join(item.text for item in self.content)


def text_result(text: str) -> ToolResult:
    """Build a ToolResult holding one text item."""
    return ToolResult(content=[TextContent(text=text)])
