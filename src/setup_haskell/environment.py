# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Explicit snapshot of the runner environment consumed by probes and strategies."""

from __future__ import annotations

import os
import platform
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_OPT_ROOT: Final[Path] = Path("/opt")
GHCUP_DIRNAME: Final[str] = ".ghcup"


def _normalize_architecture(machine: str) -> str:
    """Return the tool-cache architecture identifier derived from ``machine``."""

    normalized = machine.lower()
    if normalized in {"x86_64", "amd64", "x64"}:
        return "x64"
    if normalized in {"aarch64", "arm64"}:
        return "arm64"
    return normalized


def _optional_path(value: str | None) -> Path | None:
    if not value:
        return None
    return Path(value)


@dataclass(frozen=True, slots=True)
class EnvironmentContext:
    """Runner locations and CI plumbing captured once at process start.

    Attributes:
        home: Home directory of the runner user; ghcup installs below it.
        tool_cache_root: Root of the shared ``(tool, version)`` cache store.
        temp_dir: Scratch directory for downloads and extraction.
        opt_root: Root of the distribution-packaged compilers (``/opt``).
        chocolatey_root: Chocolatey installation directory on Windows.
        arch: Tool-cache architecture key (``x64``, ``arm64``).
        github_path_file: File collecting PATH additions for later steps.
        github_output_file: File collecting step outputs.
        github_env_file: File collecting exported variables for later steps.
        in_actions: ``True`` when running inside GitHub Actions.
    """

    home: Path
    tool_cache_root: Path
    temp_dir: Path
    opt_root: Path = DEFAULT_OPT_ROOT
    chocolatey_root: Path | None = None
    arch: str = "x64"
    github_path_file: Path | None = None
    github_output_file: Path | None = None
    github_env_file: Path | None = None
    in_actions: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> EnvironmentContext:
        """Capture the context from ``environ`` (defaults to ``os.environ``)."""

        env = os.environ if environ is None else environ
        home = Path(env.get("HOME") or env.get("USERPROFILE") or Path.home())
        temp_dir = Path(env.get("RUNNER_TEMP") or tempfile.gettempdir())
        cache_value = env.get("RUNNER_TOOL_CACHE") or env.get("AGENT_TOOLSDIRECTORY")
        tool_cache_root = Path(cache_value) if cache_value else home / ".cache" / "setup-haskell" / "tools"
        return cls(
            home=home,
            tool_cache_root=tool_cache_root,
            temp_dir=temp_dir,
            chocolatey_root=_optional_path(env.get("ChocolateyInstall") or env.get("CHOCOLATEYINSTALL")),
            arch=_normalize_architecture(platform.machine()),
            github_path_file=_optional_path(env.get("GITHUB_PATH")),
            github_output_file=_optional_path(env.get("GITHUB_OUTPUT")),
            github_env_file=_optional_path(env.get("GITHUB_ENV")),
            in_actions=env.get("GITHUB_ACTIONS") == "true",
        )

    @property
    def ghcup_root(self) -> Path:
        """Return the directory ghcup installs into."""

        return self.home / GHCUP_DIRNAME


__all__ = ["EnvironmentContext"]
