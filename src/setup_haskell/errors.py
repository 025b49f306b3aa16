# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while provisioning the toolchain."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Tool


class SetupError(RuntimeError):
    """Base class for failures that abort the whole setup run."""


class InvalidConfiguration(SetupError):
    """Raised before any installation when inputs contradict each other."""

    def __init__(self, problems: Sequence[str]) -> None:
        super().__init__("\n".join(problems))
        self.problems = tuple(problems)


class EmptyCatalog(SetupError):
    """Raised when ``latest`` is requested from a catalog without entries."""


class StrategyFailed(SetupError):
    """Raised inside a strategy when its single attempt cannot complete.

    Strategies convert this into a failed attempt; it never escapes the
    installer.
    """


class CabalConfigNotFound(SetupError):
    """Raised when cabal does not report where its user config lives."""


class AllStrategiesExhausted(SetupError):
    """Raised when no strategy produced a verifiable installation."""

    def __init__(self, tool: Tool, version: str, attempted: Sequence[str]) -> None:
        tried = ", ".join(attempted) if attempted else "none"
        super().__init__(f"All install methods for {tool} {version} failed (tried: {tried})")
        self.tool = tool
        self.version = version
        self.attempted = tuple(attempted)


__all__ = [
    "AllStrategiesExhausted",
    "CabalConfigNotFound",
    "EmptyCatalog",
    "InvalidConfiguration",
    "SetupError",
    "StrategyFailed",
]
