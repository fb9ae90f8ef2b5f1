"""Workspace scanner.

Walks a workspace root depth-first and collects every regular file whose
extension is ``meta`` or ``xml`` (case-insensitive).  The scan is
all-or-nothing: any directory that cannot be listed aborts the whole walk
with ``ListingFailed`` and nothing collected so far is returned.

Directories are walked with an explicit stack, so depth is limited only by
the tree itself.  Symlinked directories are followed and there is no cycle
detection, so a symlink loop is walked until the operating system refuses to
resolve the path and listing fails.
"""

from __future__ import annotations

import logging
import os

from .constants import META_EXTENSIONS
from .errors import ListingFailed, NotADirectory, PathNotFound
from .fs.backend import EntryKind, FilesystemBackend, LocalFilesystem

logger = logging.getLogger(__name__)


def is_meta_file(name: str) -> bool:
    """Return ``True`` if the file name carries a ``meta``/``xml`` extension.

    The extension is whatever follows the last dot.  A name with no dot, or
    whose only dot is the leading one (``.meta``), has no extension.
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return False
    return extension.lower() in META_EXTENSIONS


def scan(root: str | os.PathLike[str], fs: FilesystemBackend | None = None) -> list[str]:
    """Return the sorted paths of all meta files beneath ``root``.

    :param root: workspace directory to walk
    :param fs: filesystem backend, defaults to the local disk
    :raises PathNotFound: if ``root`` does not exist
    :raises NotADirectory: if ``root`` is not a directory
    :raises ListingFailed: if any directory in the tree cannot be listed
    """
    fs = fs or LocalFilesystem()
    root = os.fspath(root)

    if not fs.exists(root):
        raise PathNotFound(root)
    if not fs.is_dir(root):
        raise NotADirectory(root)

    logger.info("Scanning workspace %s", root)
    files: list[str] = []
    _collect(fs, root, files)
    files.sort()
    logger.info("Found %d meta files under %s", len(files), root)
    return files


def _collect(fs: FilesystemBackend, root: str, out: list[str]) -> None:
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            entries = fs.list_dir(directory)
        except OSError as exc:
            logger.error("Failed to list %s: %s", directory, exc)
            raise ListingFailed(directory, exc) from exc

        for entry in entries:
            if entry.kind is EntryKind.DIRECTORY:
                pending.append(entry.path)
            elif entry.kind is EntryKind.FILE and is_meta_file(entry.name):
                out.append(entry.path)
