# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for cabal user-config preparation."""

from __future__ import annotations

from pathlib import Path
from subprocess import CompletedProcess

import pytest

from setup_haskell.actions import ActionsRuntime
from setup_haskell.cabal_config import cabal_config_path, configure_cabal
from setup_haskell.errors import CabalConfigNotFound
from setup_haskell.models import Platform

HELP_TEXT = "Usage: cabal [GLOBAL FLAGS] [COMMAND [FLAGS]]\n\nYou can edit the cabal configuration file to set defaults:\n  {path}\n"


def _fake_cabal(config_file: Path, commands: list[list[str]], *, help_text: str = HELP_TEXT):  # noqa: ANN202
    def fake_run_command(args, **kwargs):  # noqa: ANN001
        commands.append(list(args))
        stdout = help_text.format(path=config_file) if list(args) == ["cabal", "--help"] else ""
        return CompletedProcess(args=list(args), returncode=0, stdout=stdout, stderr="")

    return fake_run_command


def test_config_path_is_last_help_line(monkeypatch, tmp_path: Path) -> None:
    config_file = tmp_path / ".cabal" / "config"
    monkeypatch.setattr("setup_haskell.cabal_config.run_command", _fake_cabal(config_file, []))

    assert cabal_config_path() == config_file


def test_config_path_requires_output(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr("setup_haskell.cabal_config.run_command", _fake_cabal(tmp_path, [], help_text=""))

    with pytest.raises(CabalConfigNotFound, match="no output"):
        cabal_config_path()


def test_configure_on_linux(monkeypatch, tmp_path: Path, runtime: ActionsRuntime) -> None:
    config_file = tmp_path / "config"
    config_file.write_text("repository hackage.haskell.org\n", encoding="utf-8")
    commands: list[list[str]] = []
    monkeypatch.setattr("setup_haskell.cabal_config.run_command", _fake_cabal(config_file, commands))

    result = configure_cabal(runtime=runtime, platform=Platform.LINUX, home=Path("/home/runner"), update_index=True)

    assert result == config_file
    assert config_file.read_text(encoding="utf-8").splitlines()[-1] == "http-transport: plain-http"
    assert runtime.outputs["cabal-store"] == "/home/runner/.cabal/store"
    assert commands == [
        ["cabal", "user-config", "update"],
        ["cabal", "--help"],
        ["cabal", "user-config", "update"],
        ["cabal", "update"],
    ]


def test_configure_on_windows_without_index(monkeypatch, tmp_path: Path, runtime: ActionsRuntime) -> None:
    config_file = tmp_path / "config"
    commands: list[list[str]] = []
    monkeypatch.setattr("setup_haskell.cabal_config.run_command", _fake_cabal(config_file, commands))

    configure_cabal(runtime=runtime, platform=Platform.WIN32, home=tmp_path, update_index=False)

    assert config_file.read_text(encoding="utf-8").splitlines() == [
        "http-transport: plain-http",
        "store-dir: C:\\sr",
    ]
    assert runtime.outputs["cabal-store"] == "C:\\sr"
    assert ["cabal", "update"] not in commands
