# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive install strategies until a verified installation exists."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from .actions import ActionsRuntime
from .environment import EnvironmentContext
from .errors import AllStrategiesExhausted
from .installed import InstalledCheck
from .models import InstallLocation, Platform, Tool
from .strategies.base import InstallStrategy
from .strategies.registry import STRATEGY_ORDER, build_strategies, ordered_strategies
from .tool_cache import ToolCache

SUPPORT_POLICY: Final[dict[Tool, str]] = {
    Tool.GHC: "the three latest major releases of ghc are commonly supported.",
    Tool.CABAL: "the two latest major releases of cabal are commonly supported.",
    Tool.STACK: "the latest release of stack is commonly supported.",
}


def missing_warning(tool: Tool, version: str) -> str:
    """Return the warning shown before a tool is downloaded."""

    return (
        f"{tool} {version} was not found in the cache. It will be downloaded.\n"
        f"If this is unexpected, please check if version {version} is pinned. "
        "The list of all supported versions is in setup_haskell/data/versions.json.\n"
        f"Note that {SUPPORT_POLICY[tool]}"
    )


class ToolInstaller:
    """Install one tool at a time by trying strategies in their declared order.

    Every attempt is followed by a fresh Installed-Check: a strategy that
    exits cleanly without leaving a usable executable counts as a failure.
    """

    def __init__(
        self,
        *,
        checker: InstalledCheck,
        strategies: Mapping[str, InstallStrategy],
        runtime: ActionsRuntime,
        order: Mapping[tuple[Tool, Platform], tuple[str, ...]] = STRATEGY_ORDER,
    ) -> None:
        self._checker = checker
        self._strategies = dict(strategies)
        self._runtime = runtime
        self._order = order

    @classmethod
    def create(
        cls,
        *,
        context: EnvironmentContext,
        runtime: ActionsRuntime,
        platform: Platform,
    ) -> ToolInstaller:
        """Wire the default cache store, checker and strategies for ``context``."""

        cache = ToolCache(root=context.tool_cache_root, arch=context.arch)
        checker = InstalledCheck(context=context, cache=cache, runtime=runtime, platform=platform)
        strategies = build_strategies(context=context, cache=cache, runtime=runtime)
        return cls(checker=checker, strategies=strategies, runtime=runtime)

    @property
    def platform(self) -> Platform:
        return self._checker.platform

    def install(self, tool: Tool, version: str) -> InstallLocation:
        """Ensure ``tool`` at ``version`` is installed and registered on the PATH.

        Raises:
            AllStrategiesExhausted: If no strategy left a verifiable install.
        """

        location = self._checker.find(tool, version)
        if location is not None:
            return location

        self._runtime.warning(missing_warning(tool, version))
        attempted: list[str] = []
        for strategy in ordered_strategies(tool, self.platform, self._strategies, self._order):
            attempted.append(strategy.name)
            strategy.attempt(tool, version, self.platform)
            location = self._checker.find(tool, version)
            if location is not None:
                return location
            self._runtime.warning(f"{strategy.name} did not produce a usable {tool} {version}")

        raise AllStrategiesExhausted(tool, version, attempted)


__all__ = ["SUPPORT_POLICY", "ToolInstaller", "missing_warning"]
