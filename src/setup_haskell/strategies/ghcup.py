# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install with the ghcup bootstrap binary."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..downloads import download_file, make_executable
from ..errors import StrategyFailed
from ..models import Platform, Tool
from ..process_utils import run_command
from .base import InstallStrategy

GHCUP_VERSION: Final[str] = "0.1.8"
GHCUP_CACHE_KEY: Final[str] = "ghcup"
GHCUP_TARGETS: Final[dict[Platform, str]] = {
    Platform.LINUX: "x86_64-linux",
    Platform.DARWIN: "x86_64-apple-darwin",
}
INSTALL_SUBCOMMANDS: Final[dict[Tool, str]] = {
    Tool.GHC: "install",
    Tool.CABAL: "install-cabal",
}


def ghcup_url(platform: Platform, version: str = GHCUP_VERSION) -> str:
    """Return the download URL of the ghcup binary for ``platform``."""

    target = GHCUP_TARGETS[platform]
    return f"https://downloads.haskell.org/ghcup/{version}/{target}-ghcup-{version}"


class GhcupStrategy(InstallStrategy):
    """Download ghcup once, then let it install (and activate) the tool.

    Several compilers may live side by side under ``~/.ghcup``; ``ghcup set``
    makes the requested one current.
    """

    name = "ghcup"
    supported = frozenset(
        {
            (Tool.GHC, Platform.LINUX),
            (Tool.GHC, Platform.DARWIN),
            (Tool.CABAL, Platform.LINUX),
            (Tool.CABAL, Platform.DARWIN),
        }
    )

    def _install(self, tool: Tool, version: str, platform: Platform) -> None:
        binary = self.ghcup_binary(platform)
        completed = run_command([str(binary), INSTALL_SUBCOMMANDS[tool], version], check=False)
        if completed.returncode != 0:
            raise StrategyFailed(f"ghcup could not install {tool} {version} (exit {completed.returncode})")
        if tool is Tool.GHC:
            run_command([str(binary), "set", version])

    def ghcup_binary(self, platform: Platform) -> Path:
        """Return the cached ghcup binary, downloading it on first use."""

        cached = self._cache.find(GHCUP_CACHE_KEY, GHCUP_VERSION)
        if cached is not None and (cached / GHCUP_CACHE_KEY).is_file():
            return cached / GHCUP_CACHE_KEY
        downloaded = download_file(ghcup_url(platform), self._context.temp_dir)
        make_executable(downloaded)
        directory = self._cache.cache_file(downloaded, GHCUP_CACHE_KEY, GHCUP_CACHE_KEY, GHCUP_VERSION)
        return directory / GHCUP_CACHE_KEY


__all__ = ["GHCUP_VERSION", "GhcupStrategy", "ghcup_url"]
