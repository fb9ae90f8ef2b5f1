"""Workspace tool implementations.

These are the operations the editor invokes: read a meta file, write a meta
file and list every meta file in a workspace.  Failures are raised as
``ToolError`` carrying a human-readable message; MCP clients receive that
message as the tool's error result.
"""

from __future__ import annotations

import logging
import os

from mcp.server.fastmcp.exceptions import ToolError

from .. import files, scanner
from ..errors import WorkspaceError
from ..meta_types import detect_meta_type, meta_type_from_file_name, relative_to_root

logger = logging.getLogger(__name__)


def read_meta_file(path: str) -> dict[str, str]:
    """Read the full text of a meta file."""
    try:
        content = files.read_text(path)
    except WorkspaceError as exc:
        logger.error("read_meta_file failed: %s", exc)
        raise ToolError(str(exc)) from exc
    return {"content": content}


def write_meta_file(path: str, content: str) -> dict[str, bool]:
    """Overwrite (or create) a meta file with ``content``.

    The write is not atomic.  The parent directory must already exist.
    """
    try:
        files.write_text(path, content)
    except WorkspaceError as exc:
        logger.error("write_meta_file failed: %s", exc)
        raise ToolError(str(exc)) from exc
    return {"written": True}


def list_workspace_meta_files(path: str) -> dict[str, list[str]]:
    """List every ``.meta``/``.xml`` file under the workspace directory ``path``.

    The result is sorted by path.  Any unreadable directory fails the whole
    call; no partial list is returned.
    """
    try:
        found = scanner.scan(path)
    except WorkspaceError as exc:
        logger.error("list_workspace_meta_files failed: %s", exc)
        raise ToolError(str(exc)) from exc
    return {"files": found}


def detect_meta_file_type(path: str) -> dict[str, str | None]:
    """Read a meta file and report which kind of vehicle data it holds.

    ``type`` is ``None`` when neither the content nor the file name is
    recognised.
    """
    content = read_meta_file(path)["content"]
    return {"path": path, "type": detect_meta_type(content, os.path.basename(path))}


def describe_workspace(path: str) -> dict[str, object]:
    """List the workspace's meta files with their relative paths and kinds.

    Kinds come from file names only, so no file is opened.
    """
    found = list_workspace_meta_files(path)["files"]
    return {
        "root": path,
        "files": [
            {
                "path": file_path,
                "relative_path": relative_to_root(file_path, path),
                "type": meta_type_from_file_name(os.path.basename(file_path)),
            }
            for file_path in found
        ],
    }
