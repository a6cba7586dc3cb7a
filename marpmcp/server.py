# -*- coding: utf-8 -*-
"""Location: ./marpmcp/server.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Marp MCP Server.

This module exposes the slide service as an MCP server speaking JSON-RPC over
stdio. Each tool validates its arguments with the pydantic models from
``marpmcp.schemas``, calls the slide service and returns a single text block:
either a JSON envelope or an ``Error: ...`` line.

Tools:
- list_layouts: describe every slide layout and its parameters
- manage_slide: insert, replace or delete a slide
- generate_slide_ids: give every slide of a deck a stable identifier
- list_slides: list slides with identifiers and previews
- generate_slide: render a slide without writing it

Environment variables (see ``marpmcp.config``):
- MARP_MCP_LOG_LEVEL: Logging level (default INFO)
- MARP_MCP_DEFAULT_FRONTMATTER: Frontmatter synthesized for decks without one

Example:
    marp-mcp
"""

# Standard
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional, Tuple, Type

# Third-Party
from mcp import types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
import mcp.server.stdio
from pydantic import BaseModel, ValidationError

# First-Party
from marpmcp import __version__
from marpmcp.config import settings
from marpmcp.models import LogLevel
from marpmcp.schemas import FileRequest, GenerateSlideRequest, ListLayoutsRequest, ManageSlideRequest
from marpmcp.services.document_service import DocumentError
from marpmcp.services.logging_service import LoggingService
from marpmcp.services.slide_service import SlideError, SlideRenderError, SlideRequestError, SlideService
from marpmcp.utils.error_formatter import ErrorFormatter

logging_service = LoggingService()
logger = logging_service.get_logger("marpmcp.server")

slide_service = SlideService()

server: Server = Server(settings.app_name)

TOOLS: Dict[str, Tuple[str, Type[BaseModel]]] = {
    "list_layouts": (
        "List all available slide layouts with their parameters, limits and Marp class names",
        ListLayoutsRequest,
    ),
    "manage_slide": (
        "Manage slides in a Marp presentation file. Insert a new slide (at start, end, or before/after a target slide), "
        "replace a slide's content while keeping its ID, or delete a slide. Slides are addressed by 1-based number "
        "(frontmatter is not counted) or by slide ID.",
        ManageSlideRequest,
    ),
    "generate_slide_ids": (
        "Assign a unique, stable ID to every slide of a Marp presentation file that does not have one yet",
        FileRequest,
    ),
    "list_slides": (
        "List the slides of a Marp presentation file with their positions, IDs and a short preview",
        FileRequest,
    ),
    "generate_slide": (
        "Render a slide from a layout and return its markdown without modifying any file",
        GenerateSlideRequest,
    ),
}


def to_json(result: Dict[str, Any]) -> str:
    """Serialize a tool result.

    Args:
        result: Tool result envelope

    Returns:
        str: JSON text indented per ``settings.json_indent``

    Examples:
        >>> print(to_json({'success': True}))
        {
          "success": true
        }
    """
    return json.dumps(result, indent=settings.json_indent, ensure_ascii=False)


async def run_tool(name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Validate arguments and call the slide service.

    Args:
        name: Tool name
        arguments: Raw tool arguments

    Returns:
        Dict[str, Any]: Tool result envelope

    Raises:
        SlideRequestError: If the tool is unknown
        ValidationError: If the arguments do not match the tool schema
    """
    if name not in TOOLS:
        raise SlideRequestError(f"Unknown tool: {name}")

    request = TOOLS[name][1].model_validate(arguments)
    if isinstance(request, ManageSlideRequest):
        return await slide_service.manage_slide(request)
    if isinstance(request, GenerateSlideRequest):
        return await slide_service.generate_slide(request.layout_type, request.params)
    if isinstance(request, FileRequest):
        if name == "generate_slide_ids":
            return await slide_service.generate_slide_ids(request.file_path)
        return await slide_service.list_slides(request.file_path)
    return await slide_service.list_layouts()


async def dispatch(name: str, arguments: Optional[Dict[str, Any]]) -> str:
    """Run a tool and render its result or failure as text.

    Args:
        name: Tool name
        arguments: Raw tool arguments

    Returns:
        str: JSON envelope on success, ``Error: ...`` otherwise

    Examples:
        >>> print(asyncio.run(dispatch('nope', {})))
        Error: Unknown tool: nope
    """
    try:
        return to_json(await run_tool(name, arguments or {}))
    except ValidationError as e:
        logger.warning(f"Invalid arguments for {name}: {e.error_count()} errors")
        return ErrorFormatter.validation_error_text(e)
    except SlideRenderError as e:
        return str(e)
    except (SlideError, DocumentError) as e:
        logger.warning(f"{name} failed: {e}")
        return ErrorFormatter.error_text(e)
    except Exception as e:
        logger.exception(f"Unexpected error in tool {name}")
        return f"Error: {name} failed unexpectedly: {e}"


@server.list_tools()
async def list_tools() -> List[types.Tool]:
    """List the tools this server provides.

    Returns:
        List[types.Tool]: Tool definitions with JSON schemas generated from the request models
    """
    return [types.Tool(name=name, description=description, inputSchema=model.model_json_schema(by_alias=True)) for name, (description, model) in TOOLS.items()]


@server.call_tool()
async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
    """Handle a tool call.

    Args:
        name: Tool name
        arguments: Tool arguments

    Returns:
        List[types.TextContent]: A single text block with the result
    """
    logger.debug(f"Calling tool {name}")
    return [types.TextContent(type="text", text=await dispatch(name, arguments))]


@server.set_logging_level()
async def set_logging_level(level: types.LoggingLevel) -> None:
    """Apply a log level requested by the client.

    Args:
        level: RFC 5424 level name
    """
    await logging_service.set_level(LogLevel(level))


async def main() -> None:
    """
    Main entry point to start the MCP stdio server.

    Raises:
        RuntimeError: If the server fails to start.
    """
    await logging_service.initialize()
    logger.info(f"Starting {settings.app_name} {__version__} (stdio)")
    try:
        async with mcp.server.stdio.stdio_server() as (reader, writer):
            await server.run(
                reader,
                writer,
                InitializationOptions(
                    server_name=settings.app_name,
                    server_version=__version__,
                    capabilities=server.get_capabilities(notification_options=NotificationOptions(), experimental_capabilities={}),
                ),
            )
    except Exception as exc:
        logger.exception("Server failed to start")
        raise RuntimeError(f"Server startup failed: {exc}") from exc
    finally:
        await logging_service.shutdown()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
    except Exception:
        logger.exception("Server failed")
        sys.exit(1)


if __name__ == "__main__":
    run()
