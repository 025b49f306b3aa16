# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared cache store keyed by ``(tool, version)``."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Final

COMPLETE_SUFFIX: Final[str] = ".complete"


@dataclass(frozen=True, slots=True)
class ToolCache:
    """Directory cache laid out as ``<root>/<tool>/<version>/<arch>``.

    An entry only counts as present once its ``<arch>.complete`` marker has
    been written, so a copy interrupted half way is never reported.
    """

    root: Path
    arch: str = "x64"

    def entry_dir(self, tool: str, version: str) -> Path:
        """Return the directory reserved for ``tool`` at ``version``."""

        return self.root / tool / version / self.arch

    def _marker(self, tool: str, version: str) -> Path:
        return self.root / tool / version / f"{self.arch}{COMPLETE_SUFFIX}"

    def find(self, tool: str, version: str) -> Path | None:
        """Return the cached directory for the exact ``(tool, version)`` key."""

        if not tool or not version:
            return None
        directory = self.entry_dir(tool, version)
        if directory.is_dir() and self._marker(tool, version).is_file():
            return directory
        return None

    def cache_dir(self, source: Path, tool: str, version: str) -> Path:
        """Copy the contents of ``source`` into the cache and return the entry.

        Args:
            source: Directory whose contents become the cache entry.
            tool: Cache key tool name.
            version: Cache key version.

        Returns:
            Path: Directory holding the cached copy.
        """

        if not source.is_dir():
            raise NotADirectoryError(f"{source} is not a directory")
        destination = self._prepare(tool, version)
        for child in source.iterdir():
            target = destination / child.name
            if child.is_dir():
                shutil.copytree(child, target, symlinks=True)
            else:
                shutil.copy2(child, target)
        self._complete(tool, version)
        return destination

    def cache_file(self, source: Path, target_name: str, tool: str, version: str) -> Path:
        """Copy the single file ``source`` into the cache as ``target_name``.

        Returns:
            Path: Directory holding the cached file.
        """

        if not source.is_file():
            raise FileNotFoundError(f"{source} is not a file")
        destination = self._prepare(tool, version)
        shutil.copy2(source, destination / target_name)
        self._complete(tool, version)
        return destination

    def _prepare(self, tool: str, version: str) -> Path:
        destination = self.entry_dir(tool, version)
        marker = self._marker(tool, version)
        marker.unlink(missing_ok=True)
        if destination.exists():
            shutil.rmtree(destination)
        destination.mkdir(parents=True)
        return destination

    def _complete(self, tool: str, version: str) -> None:
        self._marker(tool, version).write_text("", encoding="utf-8")


__all__ = ["ToolCache"]
