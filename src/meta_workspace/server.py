"""MCP server entrypoint for the meta workspace tools.

The server runs over standard input/output by default using the Model Context
Protocol.  It registers tool functions that the editor invokes to read, write
and enumerate meta files in a workspace.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .config import Config
from .tools import meta_tools


def build_tools_dispatch() -> dict[str, Callable[..., dict[str, Any]]]:
    """Return a mapping from tool names to callables.

    Each callable accepts keyword arguments and returns a JSON-serializable
    dictionary, or raises ``ToolError`` with a descriptive message.
    """
    return {
        "read_meta_file": meta_tools.read_meta_file,
        "write_meta_file": meta_tools.write_meta_file,
        "list_workspace_meta_files": meta_tools.list_workspace_meta_files,
        "detect_meta_file_type": meta_tools.detect_meta_file_type,
        "describe_workspace": meta_tools.describe_workspace,
    }


def create_server(config: Config) -> FastMCP:
    """Create the MCP server with every workspace tool registered."""
    mcp = FastMCP(config.server_name)
    dispatch = build_tools_dispatch()
    for name, func in dispatch.items():
        mcp.add_tool(func, name=name)
    logging.getLogger(__name__).info("Registered %d tools", len(dispatch))
    return mcp


def main() -> None:
    """Entrypoint for the meta workspace MCP server."""
    config = Config.load_from_env()

    # Log to stderr; stdout carries the stdio protocol
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)
    logger.info("Starting meta workspace MCP server (transport=%s)", config.transport)

    mcp = create_server(config)
    mcp.run(transport=config.transport)


if __name__ == "__main__":
    main()
