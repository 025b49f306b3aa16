# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core value types shared by the resolver, probes and install strategies."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Tool(str, Enum):
    """Haskell toolchain components that can be provisioned."""

    GHC = "ghc"
    CABAL = "cabal"
    STACK = "stack"

    def __str__(self) -> str:
        return self.value

    @property
    def executable(self) -> str:
        """Return the executable name installed for the tool."""

        return self.value


class Platform(str, Enum):
    """Operating systems supported by the runner, named after ``sys.platform``."""

    LINUX = "linux"
    DARWIN = "darwin"
    WIN32 = "win32"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def current(cls) -> Platform:
        """Return the platform of the running interpreter.

        Raises:
            ValueError: If the host operating system is not supported.
        """

        for candidate in cls:
            if sys.platform.startswith(candidate.value):
                return candidate
        raise ValueError(f"Unsupported platform '{sys.platform}'")


INSTALL_ORDER: tuple[Tool, ...] = (Tool.GHC, Tool.CABAL, Tool.STACK)


@dataclass(frozen=True, slots=True)
class InstallLocation:
    """Directory verified to contain a working executable for ``tool``."""

    tool: Tool
    version: str
    path: Path
    executable: Path
    source: str


__all__ = ["INSTALL_ORDER", "InstallLocation", "Platform", "Tool"]
