# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install through Chocolatey on Windows runners."""

from __future__ import annotations

from ..errors import StrategyFailed
from ..models import Platform, Tool
from ..process_utils import run_command
from .base import InstallStrategy


def choco_command(tool: Tool, version: str) -> list[str]:
    """Return the pinned, non-interactive ``choco install`` command."""

    return [
        "powershell",
        "choco",
        "install",
        tool.value,
        "--version",
        version,
        "-m",
        "--no-progress",
        "-r",
    ]


class ChocoStrategy(InstallStrategy):
    """Install a pinned package version with ``choco install``."""

    name = "chocolatey"
    supported = frozenset({(Tool.GHC, Platform.WIN32), (Tool.CABAL, Platform.WIN32)})

    def _install(self, tool: Tool, version: str, platform: Platform) -> None:
        del platform
        # Older ghc packages print deprecated workflow commands that fail the step.
        with self._runtime.stop_commands():
            completed = run_command(choco_command(tool, version), check=False)
        if completed.returncode != 0:
            raise StrategyFailed(f"choco install {tool} {version} exited with status {completed.returncode}")


__all__ = ["ChocoStrategy", "choco_command"]
