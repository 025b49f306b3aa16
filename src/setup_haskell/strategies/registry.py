# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static ordering of install strategies per tool and platform."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from ..actions import ActionsRuntime
from ..environment import EnvironmentContext
from ..models import Platform, Tool
from ..tool_cache import ToolCache
from .apt import AptStrategy
from .base import InstallStrategy
from .choco import ChocoStrategy
from .ghcup import GhcupStrategy
from .stack_release import StackReleaseStrategy

STRATEGY_TYPES: Final[tuple[type[InstallStrategy], ...]] = (
    AptStrategy,
    ChocoStrategy,
    GhcupStrategy,
    StackReleaseStrategy,
)

STRATEGY_ORDER: Final[dict[tuple[Tool, Platform], tuple[str, ...]]] = {
    (Tool.GHC, Platform.LINUX): (AptStrategy.name, GhcupStrategy.name),
    (Tool.GHC, Platform.DARWIN): (GhcupStrategy.name,),
    (Tool.GHC, Platform.WIN32): (ChocoStrategy.name,),
    (Tool.CABAL, Platform.LINUX): (AptStrategy.name, GhcupStrategy.name),
    (Tool.CABAL, Platform.DARWIN): (GhcupStrategy.name,),
    (Tool.CABAL, Platform.WIN32): (ChocoStrategy.name,),
    (Tool.STACK, Platform.LINUX): (StackReleaseStrategy.name,),
    (Tool.STACK, Platform.DARWIN): (StackReleaseStrategy.name,),
    (Tool.STACK, Platform.WIN32): (StackReleaseStrategy.name,),
}


def build_strategies(
    *,
    context: EnvironmentContext,
    cache: ToolCache,
    runtime: ActionsRuntime,
) -> dict[str, InstallStrategy]:
    """Instantiate every known strategy keyed by name."""

    return {
        strategy_type.name: strategy_type(context=context, cache=cache, runtime=runtime)
        for strategy_type in STRATEGY_TYPES
    }


def ordered_strategies(
    tool: Tool,
    platform: Platform,
    strategies: Mapping[str, InstallStrategy],
    order: Mapping[tuple[Tool, Platform], tuple[str, ...]] = STRATEGY_ORDER,
) -> tuple[InstallStrategy, ...]:
    """Return the strategies to try for ``tool`` on ``platform``, in order.

    Entries that are not declared for the pair are skipped.
    """

    selected: list[InstallStrategy] = []
    for name in order.get((tool, platform), ()):
        strategy = strategies.get(name)
        if strategy is not None and strategy.supports(tool, platform):
            selected.append(strategy)
    return tuple(selected)


__all__ = ["STRATEGY_ORDER", "STRATEGY_TYPES", "build_strategies", "ordered_strategies"]
