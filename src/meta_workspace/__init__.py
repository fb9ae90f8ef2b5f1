"""Top‑level package for the meta workspace MCP server.

This package exposes a tools‑only server that lets an editor read, write and
enumerate ``.meta`` / ``.xml`` files beneath a workspace directory.  See
`DESIGN.md` for more information.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
