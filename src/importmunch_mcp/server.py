"""MCP server for importmunch-mcp."""

import asyncio
import json

from mcp.server import Server
from mcp.types import Tool, TextContent

from .logging_config import configure_logging
from .tools.scan_imports import scan_imports, get_import_records


# Create server
server = Server("importmunch-mcp")


SCAN_PROPERTIES = {
    "path": {
        "type": "string",
        "description": "Path to local folder (absolute or relative, supports ~ for home directory)"
    },
    "target_pkg": {
        "type": "string",
        "description": "Package to look for, matched as a prefix of the module specifier (e.g., '@scope/pkg')"
    },
    "regex": {
        "type": "boolean",
        "description": "Treat target_pkg as a regular expression instead of a prefix",
        "default": False
    },
    "exclude_paths": {
        "type": "array",
        "items": {"type": "string"},
        "description": "Extra glob patterns to skip (node_modules, dist, build and coverage are always skipped)"
    },
    "patterns": {
        "type": "array",
        "items": {"type": "string"},
        "description": "Glob patterns selecting files to scan (default: **/*.ts, **/*.tsx)"
    },
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="scan_imports",
            description="Find every name a local TypeScript/JavaScript codebase imports or re-exports from a package. Returns the sorted unique names.",
            inputSchema={
                "type": "object",
                "properties": SCAN_PROPERTIES,
                "required": ["path", "target_pkg"]
            }
        ),
        Tool(
            name="get_import_records",
            description="Like scan_imports, but also returns one record per matching import/export statement with its file, line, kind and names. Use to find every consumer of a package.",
            inputSchema={
                "type": "object",
                "properties": SCAN_PROPERTIES,
                "required": ["path", "target_pkg"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name in ("scan_imports", "get_import_records"):
            tool = scan_imports if name == "scan_imports" else get_import_records
            result = tool(
                path=arguments["path"],
                target_pkg=arguments["target_pkg"],
                regex=arguments.get("regex", False),
                exclude_paths=arguments.get("exclude_paths"),
                patterns=arguments.get("patterns"),
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    configure_logging()
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
