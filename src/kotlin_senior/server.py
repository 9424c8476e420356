"""
MCP transport adapter: exposes a ToolInvoker over the Model Context Protocol.

Uses the MCP SDK's low-level server so that discovery returns the registry
descriptors verbatim and every call goes through the invoker. The
``tools/call`` handler is registered directly rather than through the SDK's
``call_tool`` decorator, which replaces absent arguments with ``{}`` and runs
its own JSON-schema validation; the invoker must see the raw arguments.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from kotlin_senior.config.settings import ServerSettings
from kotlin_senior.dispatch.envelope import to_mcp_error_result, to_mcp_result
from kotlin_senior.dispatch.errors import ToolError
from kotlin_senior.dispatch.invoker import ToolInvoker
from kotlin_senior.dispatch.registry import ToolDescriptor

logger = structlog.get_logger(__name__)


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    """Convert a descriptor to the SDK's Tool type."""
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def build_server(invoker: ToolInvoker, settings: Optional[ServerSettings] = None) -> Server:
    """Create an MCP server whose list/call handlers delegate to ``invoker``."""
    settings = settings or ServerSettings()
    server: Server = Server(settings.name, version=settings.version, instructions=settings.instructions)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [to_mcp_tool(d) for d in invoker.list_tools()]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        # Errors become isError results for this request only.
        try:
            result = invoker.invoke(req.params.name, req.params.arguments)
        except ToolError as e:
            return types.ServerResult(to_mcp_error_result(e))
        except Exception as e:
            logger.error("tool_call_failed", tool=req.params.name, error=str(e))
            return types.ServerResult(to_mcp_error_result(e))
        return types.ServerResult(to_mcp_result(result))

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def run_stdio(server: Server) -> None:
    """Serve ``server`` over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("server_started", server=server.name, transport="stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("server_stopped", server=server.name)
