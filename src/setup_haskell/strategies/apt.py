# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install from the distribution's package repository with ``apt-get``."""

from __future__ import annotations

from typing import Final

from ..errors import StrategyFailed
from ..installed import major_minor
from ..models import Platform, Tool
from ..process_utils import run_command
from .base import InstallStrategy

PACKAGE_NAMES: Final[dict[Tool, str]] = {
    Tool.GHC: "ghc",
    Tool.CABAL: "cabal-install",
}


def package_spec(tool: Tool, version: str) -> str:
    """Return the versioned package name, e.g. ``cabal-install-3.0``."""

    package_version = major_minor(version) if tool is Tool.CABAL else version
    return f"{PACKAGE_NAMES[tool]}-{package_version}"


class AptStrategy(InstallStrategy):
    """Install ``ghc-<v>`` or ``cabal-install-<major.minor>`` via ``apt-get``.

    Only a handful of versions are packaged; a missing package is an ordinary
    failed attempt.
    """

    name = "apt"
    supported = frozenset({(Tool.GHC, Platform.LINUX), (Tool.CABAL, Platform.LINUX)})

    def _install(self, tool: Tool, version: str, platform: Platform) -> None:
        del platform
        package = package_spec(tool, version)
        completed = run_command(
            ["sudo", "--", "sh", "-c", f"apt-get -y install {package}"],
            check=False,
        )
        if completed.returncode != 0:
            raise StrategyFailed(f"apt-get install {package} exited with status {completed.returncode}")


__all__ = ["AptStrategy", "PACKAGE_NAMES", "package_spec"]
