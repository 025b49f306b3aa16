# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the subprocess wrapper."""

from __future__ import annotations

import shutil

import pytest

from setup_haskell.process_utils import SubprocessExecutionError, run_command

pytestmark = pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")


def test_run_command_captures_output() -> None:
    completed = run_command(["sh", "-c", "echo 3.2.0.0"], capture_output=True)

    assert completed.returncode == 0
    assert completed.stdout.strip() == "3.2.0.0"


def test_non_zero_exit_raises_when_checked() -> None:
    with pytest.raises(SubprocessExecutionError) as excinfo:
        run_command(["sh", "-c", "echo broken >&2; exit 3"], capture_output=True)

    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr is not None
    assert "broken" in excinfo.value.stderr
    assert excinfo.value.command[0] == shutil.which("sh")


def test_non_zero_exit_is_returned_when_unchecked() -> None:
    completed = run_command(["sh", "-c", "exit 100"], check=False)

    assert completed.returncode == 100


def test_missing_program() -> None:
    with pytest.raises(FileNotFoundError, match="was not found on PATH"):
        run_command(["definitely-not-a-real-program-4f2a"])


def test_empty_command() -> None:
    with pytest.raises(ValueError):
        run_command([])
