# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the GitHub Actions runtime integration."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from setup_haskell.actions import ActionsRuntime
from setup_haskell.environment import EnvironmentContext


def test_add_path_prepends_and_records(
    runtime: ActionsRuntime,
    context: EnvironmentContext,
    environ: dict[str, str],
) -> None:
    runtime.add_path(Path("/opt/ghc/8.8.3/bin"))

    assert environ["PATH"] == "/opt/ghc/8.8.3/bin:/usr/bin"
    assert runtime.registered_paths == [Path("/opt/ghc/8.8.3/bin")]
    assert context.github_path_file is not None
    assert context.github_path_file.read_text(encoding="utf-8") == "/opt/ghc/8.8.3/bin\n"


def test_set_output_writes_command_file(runtime: ActionsRuntime, context: EnvironmentContext) -> None:
    runtime.set_output("ghc-path", "/opt/ghc/8.8.3/bin")

    assert runtime.outputs == {"ghc-path": "/opt/ghc/8.8.3/bin"}
    assert context.github_output_file is not None
    assert context.github_output_file.read_text(encoding="utf-8") == "ghc-path=/opt/ghc/8.8.3/bin\n"


def test_multiline_values_use_delimiter(runtime: ActionsRuntime, context: EnvironmentContext) -> None:
    runtime.export_variable("NOTE", "first\nsecond")

    assert context.github_env_file is not None
    lines = context.github_env_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("NOTE<<ghadelimiter_")
    assert lines[1:3] == ["first", "second"]
    assert lines[3] == lines[0].split("<<", 1)[1]


def test_export_variable_updates_environment(runtime: ActionsRuntime, environ: dict[str, str]) -> None:
    runtime.export_variable("STACK_ROOT", "C:\\sr")

    assert environ["STACK_ROOT"] == "C:\\sr"


def test_without_command_files_only_process_state_changes(tmp_path: Path) -> None:
    context = EnvironmentContext(home=tmp_path, tool_cache_root=tmp_path / "cache", temp_dir=tmp_path)
    environ: dict[str, str] = {}
    runtime = ActionsRuntime(context, environ=environ, use_emoji=False)

    runtime.add_path(tmp_path / "bin")
    runtime.set_output("cabal-store", "/home/runner/.cabal/store")

    assert environ["PATH"] == str(tmp_path / "bin")
    assert runtime.outputs["cabal-store"] == "/home/runner/.cabal/store"


def test_annotations_inside_actions(context: EnvironmentContext, capsys) -> None:  # noqa: ANN001
    runtime = ActionsRuntime(dataclasses.replace(context, in_actions=True), environ={}, use_emoji=False)

    runtime.warning("ghc 9.0.1 was not found\nIt will be downloaded.")
    runtime.error("100% broken")
    with runtime.group("Installing ghc version 8.8.3"):
        print("inside")

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "::warning::ghc 9.0.1 was not found%0AIt will be downloaded.",
        "::error::100%25 broken",
        "::group::Installing ghc version 8.8.3",
        "inside",
        "::endgroup::",
    ]


def test_console_output_outside_actions(runtime: ActionsRuntime, capsys) -> None:  # noqa: ANN001
    runtime.warning("careful")
    with runtime.group("Setting up cabal"):
        runtime.info("the config file is: x")

    out = capsys.readouterr().out
    assert "careful" in out
    assert "--- Setting up cabal ---" in out
    assert "::group::" not in out


def test_stop_commands_wraps_block(runtime: ActionsRuntime, capsys) -> None:  # noqa: ANN001
    with runtime.stop_commands():
        print("::set-env name=X::1")

    assert capsys.readouterr().out.splitlines() == [
        "::stop-commands::SetupHaskellStopCommands",
        "::set-env name=X::1",
        "::SetupHaskellStopCommands::",
    ]
