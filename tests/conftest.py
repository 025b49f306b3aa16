# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from setup_haskell.actions import ActionsRuntime
from setup_haskell.catalog import Catalog, ToolVersions
from setup_haskell.environment import EnvironmentContext
from setup_haskell.tool_cache import ToolCache


def _write_executable(directory: Path, name: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    executable = directory / name
    executable.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    executable.chmod(0o755)
    return executable


@pytest.fixture
def write_executable() -> Callable[[Path, str], Path]:
    """Return a factory creating a runnable stub named ``name`` inside ``directory``."""

    return _write_executable


@pytest.fixture
def context(tmp_path: Path) -> EnvironmentContext:
    """Return a runner context rooted entirely inside ``tmp_path``."""

    temp_dir = tmp_path / "temp"
    temp_dir.mkdir()
    return EnvironmentContext(
        home=tmp_path / "home",
        tool_cache_root=tmp_path / "toolcache",
        temp_dir=temp_dir,
        opt_root=tmp_path / "opt",
        chocolatey_root=tmp_path / "choco",
        arch="x64",
        github_path_file=tmp_path / "github_path",
        github_output_file=tmp_path / "github_output",
        github_env_file=tmp_path / "github_env",
        in_actions=False,
    )


@pytest.fixture
def environ() -> dict[str, str]:
    return {"PATH": "/usr/bin"}


@pytest.fixture
def runtime(context: EnvironmentContext, environ: dict[str, str]) -> ActionsRuntime:
    return ActionsRuntime(context, environ=environ, use_emoji=False)


@pytest.fixture
def cache(context: EnvironmentContext) -> ToolCache:
    return ToolCache(root=context.tool_cache_root, arch=context.arch)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        ghc=ToolVersions(default="8.8.3", supported=("8.8.3", "8.6.5")),
        cabal=ToolVersions(default="3.0.0.0", supported=("3.0.0.0", "2.4.1.0")),
        stack=ToolVersions(default="latest", supported=("2.3.1", "2.1.3")),
    )
