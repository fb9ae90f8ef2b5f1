"""Pytest configuration and fixtures for meta workspace tests.

This module provides a FakeFilesystem that can be used to exercise the
scanner without touching the disk, including failures a real disk rarely
produces on demand.

IMPORTANT: Environment variables must be set BEFORE importing meta_workspace
modules, as the constants module reads them at import time.
"""

from __future__ import annotations

import os

# Set environment variables BEFORE any meta_workspace imports
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("MCP_TRANSPORT", "stdio")

import errno
import posixpath
from pathlib import Path

import pytest

from meta_workspace.fs.backend import DirectoryEntry, EntryKind


class FakeFilesystem:
    """An in-memory backend with POSIX-style paths.

    This is ONLY for testing - not used in production.  Directories listed
    in ``unlistable`` fail when listed; paths in ``unclassifiable`` make
    their parent's listing fail, as a vanished entry would.
    """

    def __init__(self) -> None:
        self._kinds: dict[str, EntryKind] = {}
        self._contents: dict[str, str] = {}
        self.unlistable: set[str] = set()
        self.unclassifiable: set[str] = set()
        self.listed: list[str] = []

    def _add(self, path: str, kind: EntryKind) -> None:
        # Create missing parents without recursion so very deep trees work
        missing = []
        parent = posixpath.dirname(path)
        while parent and parent not in self._kinds:
            missing.append(parent)
            if posixpath.dirname(parent) == parent:
                break
            parent = posixpath.dirname(parent)
        for directory in reversed(missing):
            self._kinds[directory] = EntryKind.DIRECTORY
        self._kinds[path] = kind

    def add_dir(self, path: str) -> None:
        self._add(path, EntryKind.DIRECTORY)

    def add_file(self, path: str, content: str = "") -> None:
        self._add(path, EntryKind.FILE)
        self._contents[path] = content

    def add_other(self, path: str) -> None:
        self._add(path, EntryKind.OTHER)

    def exists(self, path: str) -> bool:
        return path in self._kinds

    def is_dir(self, path: str) -> bool:
        return self._kinds.get(path) is EntryKind.DIRECTORY

    def list_dir(self, path: str) -> list[DirectoryEntry]:
        self.listed.append(path)
        if path in self.unlistable:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        entries = []
        # Reverse insertion order so callers cannot rely on listing order
        for child in reversed(list(self._kinds)):
            if child != path and posixpath.dirname(child) == path:
                if child in self.unclassifiable:
                    raise FileNotFoundError(errno.ENOENT, "No such file or directory", child)
                entries.append(DirectoryEntry(path=child, name=posixpath.basename(child), kind=self._kinds[child]))
        return entries

    def read_text(self, path: str) -> str:
        if self._kinds.get(path) is not EntryKind.FILE:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return self._contents[path]

    def write_text(self, path: str, content: str) -> None:
        if not self.is_dir(posixpath.dirname(path)):
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        self._kinds[path] = EntryKind.FILE
        self._contents[path] = content


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    """Fake filesystem holding the canonical example workspace ``/ws``."""
    fs = FakeFilesystem()
    fs.add_file("/ws/a.meta", "<CHandlingDataMgr />")
    fs.add_file("/ws/sub/b.xml", "<CVehicleModelInfo__InitDataList />")
    fs.add_file("/ws/sub/c.txt")
    fs.add_file("/ws/d.json")
    return fs


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a small on-disk workspace and return its root."""
    root = tmp_path / "ws"
    (root / "data" / "handling").mkdir(parents=True)
    (root / "stream").mkdir()
    (root / "empty").mkdir()

    (root / "fxmanifest.lua").write_text("fx_version 'cerulean'\n", encoding="utf-8")
    (root / "data" / "vehicles.meta").write_text("<CVehicleModelInfo__InitDataList />", encoding="utf-8")
    (root / "data" / "carcols.XML").write_text("<CVehicleModelInfoVarGlobal />", encoding="utf-8")
    (root / "data" / "handling" / "handling.Meta").write_text("<CHandlingDataMgr />", encoding="utf-8")
    (root / "data" / "notes.meta.bak").write_text("old", encoding="utf-8")
    (root / "stream" / "car.yft").write_bytes(b"\x00\x01")
    return root


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up basic test environment."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MCP_TRANSPORT", "stdio")
    monkeypatch.delenv("MCP_SERVER_NAME", raising=False)
