"""Global constants for the meta workspace MCP server.

These values serve as defaults for configuration.  Override the environment
variables rather than editing this module.
"""

import os

# File extensions (lower-case, without the dot) that a workspace scan collects
META_EXTENSIONS = frozenset({"meta", "xml"})

# Encoding used for every text read and write
TEXT_ENCODING = "utf-8"

# Transport
MCP_TRANSPORT = os.environ.get("MCP_TRANSPORT", "stdio")
SUPPORTED_TRANSPORTS = ("stdio", "sse", "streamable-http")
MCP_SERVER_NAME = os.environ.get("MCP_SERVER_NAME", "meta-workspace-mcp")

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
