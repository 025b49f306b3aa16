# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install strategy implementations, one per package source."""

from .apt import AptStrategy
from .base import InstallStrategy
from .choco import ChocoStrategy
from .ghcup import GhcupStrategy
from .registry import STRATEGY_ORDER, build_strategies, ordered_strategies
from .stack_release import StackReleaseStrategy

__all__ = [
    "AptStrategy",
    "ChocoStrategy",
    "GhcupStrategy",
    "InstallStrategy",
    "STRATEGY_ORDER",
    "StackReleaseStrategy",
    "build_strategies",
    "ordered_strategies",
]
