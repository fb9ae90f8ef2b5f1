"""Configuration loading for the meta workspace MCP server.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Optional variables with defaults:
- LOG_LEVEL (default: 'INFO')
- MCP_TRANSPORT (default: 'stdio')
- MCP_SERVER_NAME (default: 'meta-workspace-mcp')
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import (
    DEFAULT_LOG_LEVEL,
    MCP_SERVER_NAME,
    MCP_TRANSPORT,
    SUPPORTED_TRANSPORTS,
)


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    log_level: str
    transport: str
    server_name: str

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  Raises `RuntimeError` if
        ``MCP_TRANSPORT`` names a transport the server cannot run.
        """
        load_dotenv()

        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

        transport = os.getenv("MCP_TRANSPORT", MCP_TRANSPORT).strip().lower()
        if transport not in SUPPORTED_TRANSPORTS:
            raise RuntimeError(
                f"Unsupported MCP_TRANSPORT '{transport}', expected one of: {', '.join(SUPPORTED_TRANSPORTS)}"
            )

        server_name = os.getenv("MCP_SERVER_NAME") or MCP_SERVER_NAME

        return cls(
            log_level=log_level,
            transport=transport,
            server_name=server_name,
        )
