# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Strategy abstraction shared by every install source."""

from __future__ import annotations

import tarfile
from abc import ABC, abstractmethod
from typing import ClassVar

import requests

from ..actions import ActionsRuntime
from ..environment import EnvironmentContext
from ..errors import StrategyFailed
from ..models import Platform, Tool
from ..process_utils import SubprocessExecutionError
from ..tool_cache import ToolCache

RECOVERABLE_ERRORS: tuple[type[BaseException], ...] = (
    StrategyFailed,
    SubprocessExecutionError,
    OSError,
    requests.RequestException,
    tarfile.TarError,
)


class InstallStrategy(ABC):
    """One mechanism able to install some tools on some platforms.

    A strategy performs a single attempt and reports whether it ran to
    completion. It never decides ordering and never certifies the result;
    the installer re-probes after every attempt.
    """

    name: ClassVar[str]
    supported: ClassVar[frozenset[tuple[Tool, Platform]]]

    def __init__(
        self,
        *,
        context: EnvironmentContext,
        cache: ToolCache,
        runtime: ActionsRuntime,
    ) -> None:
        self._context = context
        self._cache = cache
        self._runtime = runtime

    def supports(self, tool: Tool, platform: Platform) -> bool:
        return (tool, platform) in self.supported

    def attempt(self, tool: Tool, version: str, platform: Platform) -> bool:
        """Run one installation attempt, converting recoverable errors into ``False``.

        Raises:
            ValueError: If the strategy is not declared for ``(tool, platform)``.
        """

        if not self.supports(tool, platform):
            raise ValueError(f"{self.name} cannot install {tool} on {platform}")
        self._runtime.info(f"Attempting to install {tool} {version} using {self.name}")
        try:
            self._install(tool, version, platform)
        except RECOVERABLE_ERRORS as exc:
            self._runtime.warning(f"{self.name} could not install {tool} {version}: {exc}")
            return False
        return True

    @abstractmethod
    def _install(self, tool: Tool, version: str, platform: Platform) -> None:
        raise NotImplementedError


__all__ = ["InstallStrategy", "RECOVERABLE_ERRORS"]
