"""Tool module exports for the meta workspace MCP server.

Each submodule exposes plain functions that the server registers as MCP
tools.

Usage:

    from meta_workspace.tools import meta_tools
    meta_tools.list_workspace_meta_files("/path/to/workspace")
"""

from . import meta_tools  # noqa: F401

__all__ = ["meta_tools"]
