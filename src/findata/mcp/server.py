"""MCP server exposing the financial-data tools over stdio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from findata import __version__
from findata.remote.client import RemoteDataClient
from findata.tools.dispatcher import ToolDispatcher

if TYPE_CHECKING:
    from findata.config.schema import FindataConfig
    from findata.tools.base import ToolResponse
    from findata.tools.registry import ToolRegistry

SERVER_NAME = "financial-data-mcp"

logger = logging.getLogger(__name__)


def _get_tools(registry: ToolRegistry) -> list[Tool]:
    """Convert the registry catalog into MCP tool definitions."""
    return [
        Tool(
            name=str(definition.name),
            description=definition.description,
            inputSchema=definition.input_schema,
        )
        for definition in registry.list_tools()
    ]


def to_call_tool_result(response: ToolResponse) -> CallToolResult:
    """Wrap a dispatcher response in the MCP content envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=text) for text in response.content],
        isError=response.is_error,
    )


async def handle_call_tool(
    dispatcher: ToolDispatcher, name: str, arguments: dict[str, Any] | None
) -> CallToolResult:
    """Dispatch one ``tools/call`` request."""
    response = await dispatcher.dispatch(name, arguments or {})
    return to_call_tool_result(response)


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Build an MCP server whose handlers delegate to *dispatcher*."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
    async def list_tools() -> list[Tool]:
        """List available MCP tools."""
        return _get_tools(dispatcher.registry)

    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def call_tool(name: str, arguments: dict) -> CallToolResult:  # type: ignore[type-arg]
        """Handle tool calls."""
        return await handle_call_tool(dispatcher, name, arguments)

    return server


async def run_server(config: FindataConfig) -> None:
    """Start the MCP server on stdio."""
    async with RemoteDataClient(config.api) as client:
        dispatcher = ToolDispatcher(client, locale=config.display.locale)
        server = create_server(dispatcher)
        logger.info("Financial Data MCP server running against %s", client.base_url)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
