"""Whole-file text read and write helpers."""

from __future__ import annotations

import logging
import os

from .errors import ReadFailed, WriteFailed
from .fs.backend import FilesystemBackend, LocalFilesystem

logger = logging.getLogger(__name__)


def read_text(path: str | os.PathLike[str], fs: FilesystemBackend | None = None) -> str:
    """Return the full text of ``path``.

    Missing files, permission problems and undecodable bytes all raise
    ``ReadFailed``.
    """
    fs = fs or LocalFilesystem()
    path = os.fspath(path)
    try:
        return fs.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailed(path, exc) from exc


def write_text(path: str | os.PathLike[str], content: str, fs: FilesystemBackend | None = None) -> None:
    """Replace the contents of ``path`` with ``content``, creating it if needed.

    The write is not atomic; a failure part way through can leave the file
    truncated.  Parent directories are not created.
    """
    fs = fs or LocalFilesystem()
    path = os.fspath(path)
    try:
        fs.write_text(path, content)
    except OSError as exc:
        raise WriteFailed(path, exc) from exc
    logger.debug("Wrote %d characters to %s", len(content), path)
