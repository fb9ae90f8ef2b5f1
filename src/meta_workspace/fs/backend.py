"""Filesystem backends.

This module defines the backend abstraction consumed by the workspace scanner
and the read/write helpers.  A backend lists and classifies directory entries
and moves text in and out of files; it raises plain ``OSError`` (or
``UnicodeDecodeError``) and leaves translation into workspace errors to its
callers.

In production, only LocalFilesystem is used.  For testing, a FakeFilesystem is
available in tests/conftest.py.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Protocol

from ..constants import TEXT_ENCODING


class EntryKind(enum.Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryEntry:
    """One classified entry of a directory listing."""

    path: str
    name: str
    kind: EntryKind


class FilesystemBackend(Protocol):
    """Interface for a filesystem backend.

    ``list_dir`` must return every immediate entry of ``path`` already
    classified, with ``entry.path`` being ``path`` joined with the entry name.
    Listing or classification failures are raised as ``OSError``.
    """

    def exists(self, path: str) -> bool:
        ...

    def is_dir(self, path: str) -> bool:
        ...

    def list_dir(self, path: str) -> list[DirectoryEntry]:
        ...

    def read_text(self, path: str) -> str:
        ...

    def write_text(self, path: str, content: str) -> None:
        ...


class LocalFilesystem:
    """Backend over the local disk, built on ``os.scandir``.

    Symlinks are followed when classifying, so a link to a directory is
    walked like a directory and a dangling link is neither a file nor a
    directory.
    """

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_dir(self, path: str) -> list[DirectoryEntry]:
        # Materialise the listing so no directory handle stays open while
        # the caller recurses.
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                entries.append(DirectoryEntry(path=entry.path, name=entry.name, kind=self._classify(entry)))
        return entries

    @staticmethod
    def _classify(entry: os.DirEntry) -> EntryKind:
        if entry.is_dir():
            return EntryKind.DIRECTORY
        if entry.is_file():
            return EntryKind.FILE
        return EntryKind.OTHER

    def read_text(self, path: str) -> str:
        # newline="" keeps line endings exactly as stored
        with open(path, encoding=TEXT_ENCODING, newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        with open(path, "w", encoding=TEXT_ENCODING, newline="") as f:
            f.write(content)
