# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the end-to-end setup sequence."""

from __future__ import annotations

from pathlib import Path
from subprocess import CompletedProcess

import pytest

from setup_haskell.actions import ActionsRuntime
from setup_haskell.catalog import Catalog
from setup_haskell.config import ActionInputs, build_options
from setup_haskell.environment import EnvironmentContext
from setup_haskell.errors import InvalidConfiguration
from setup_haskell.installed import apt_path
from setup_haskell.models import InstallLocation, Platform, Tool
from setup_haskell.runner import run_setup, setup


class FakeInstaller:
    """Installer double returning a location for every request."""

    platform = Platform.LINUX

    def __init__(self) -> None:
        self.calls: list[tuple[Tool, str]] = []

    def install(self, tool: Tool, version: str) -> InstallLocation:
        self.calls.append((tool, version))
        path = Path("/opt") / tool.value / version / "bin"
        return InstallLocation(tool, version, path, path / tool.executable, "apt")


@pytest.fixture
def recorded(monkeypatch):  # noqa: ANN001, ANN201
    calls: dict[str, list] = {"commands": [], "cabal": []}

    def fake_run_command(args, **kwargs):  # noqa: ANN001
        calls["commands"].append(list(args))
        return CompletedProcess(args=list(args), returncode=0, stdout="", stderr="")

    def fake_configure_cabal(**kwargs):  # noqa: ANN003
        calls["cabal"].append(kwargs)
        return Path("/home/runner/.cabal/config")

    monkeypatch.setattr("setup_haskell.runner.run_command", fake_run_command)
    monkeypatch.setattr("setup_haskell.runner.configure_cabal", fake_configure_cabal)
    return calls


def test_defaults_install_ghc_then_cabal(recorded, runtime: ActionsRuntime, catalog: Catalog) -> None:  # noqa: ANN001
    installer = FakeInstaller()

    locations = run_setup(build_options(ActionInputs(), catalog), installer=installer, runtime=runtime)  # type: ignore[arg-type]

    assert installer.calls == [(Tool.GHC, "8.8.3"), (Tool.CABAL, "3.0.0.0")]
    assert list(locations) == [Tool.GHC, Tool.CABAL]
    assert recorded["commands"] == []
    assert [call["update_index"] for call in recorded["cabal"]] == [True]


def test_stack_setup_runs_after_installs(recorded, runtime: ActionsRuntime, catalog: Catalog) -> None:  # noqa: ANN001
    installer = FakeInstaller()
    options = build_options(ActionInputs(ghc_version="8.6", stack_version="latest", stack_setup_ghc=True), catalog)

    run_setup(options, installer=installer, runtime=runtime)  # type: ignore[arg-type]

    assert installer.calls == [(Tool.GHC, "8.6.5"), (Tool.CABAL, "3.0.0.0"), (Tool.STACK, "2.3.1")]
    assert recorded["commands"] == [["stack", "setup", "8.6.5"]]
    assert [call["update_index"] for call in recorded["cabal"]] == [False]


def test_stack_no_global_installs_only_stack(recorded, runtime: ActionsRuntime, catalog: Catalog) -> None:  # noqa: ANN001
    installer = FakeInstaller()
    options = build_options(ActionInputs(stack_version="2.1.3", stack_no_global=True), catalog)

    run_setup(options, installer=installer, runtime=runtime)  # type: ignore[arg-type]

    assert installer.calls == [(Tool.STACK, "2.1.3")]
    assert recorded["cabal"] == []


def test_invalid_inputs_abort_before_installing(
    monkeypatch,  # noqa: ANN001
    context: EnvironmentContext,
    runtime: ActionsRuntime,
    catalog: Catalog,
) -> None:
    def fail_create(**kwargs):  # noqa: ANN003
        raise AssertionError("no installer may be created")

    monkeypatch.setattr("setup_haskell.runner.ToolInstaller.create", fail_create)

    with pytest.raises(InvalidConfiguration):
        setup(
            ActionInputs(stack_setup_ghc=True),
            catalog=catalog,
            context=context,
            runtime=runtime,
            platform=Platform.LINUX,
        )
    assert runtime.registered_paths == []


def test_preinstalled_toolchain_needs_no_strategy(
    monkeypatch,  # noqa: ANN001
    recorded,  # noqa: ANN001
    context: EnvironmentContext,
    runtime: ActionsRuntime,
    catalog: Catalog,
    write_executable,  # noqa: ANN001
) -> None:
    def no_subprocess(args, **kwargs):  # noqa: ANN001
        raise AssertionError(f"unexpected command {args}")

    monkeypatch.setattr("setup_haskell.strategies.apt.run_command", no_subprocess)
    monkeypatch.setattr("setup_haskell.strategies.ghcup.run_command", no_subprocess)
    write_executable(apt_path(Tool.GHC, "8.8.3", context), "ghc")
    write_executable(apt_path(Tool.CABAL, "3.0.0.0", context), "cabal")

    locations = setup(ActionInputs(), catalog=catalog, context=context, runtime=runtime, platform=Platform.LINUX)

    assert {tool: location.source for tool, location in locations.items()} == {Tool.GHC: "apt", Tool.CABAL: "apt"}
    assert runtime.registered_paths == [
        context.opt_root / "ghc" / "8.8.3" / "bin",
        context.opt_root / "cabal" / "3.0" / "bin",
    ]
    assert runtime.outputs["ghc-exe"] == str(context.opt_root / "ghc" / "8.8.3" / "bin" / "ghc")
    assert recorded["cabal"][0]["platform"] is Platform.LINUX
