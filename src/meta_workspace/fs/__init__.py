"""Filesystem primitives used by the scanner and the file helpers."""

from .backend import DirectoryEntry, EntryKind, FilesystemBackend, LocalFilesystem

__all__ = ["DirectoryEntry", "EntryKind", "FilesystemBackend", "LocalFilesystem"]
