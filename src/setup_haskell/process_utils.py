# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run installer and package-manager commands without a shell."""

from __future__ import annotations

import shutil

# Bandit: commands are argument lists built from fixed templates; ``shell=True``
# is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path


class SubprocessExecutionError(RuntimeError):
    """A checked command exited with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}")
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _resolve_command(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the program replaced by its absolute path.

    Raises:
        FileNotFoundError: If the program is not on the search path.
    """

    if not args:
        raise ValueError("a command needs at least the program name")
    program, *rest = args
    if Path(program).is_absolute():
        return [program, *rest]
    located = shutil.which(program)
    if located is None:
        raise FileNotFoundError(f"Executable '{program}' was not found on PATH")
    return [located, *rest]


def run_command(
    args: Sequence[str],
    *,
    check: bool = True,
    capture_output: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run ``args`` to completion and return the finished process.

    Nothing bounds the run time; a hung installer blocks until the CI job
    limit cancels it.

    Raises:
        SubprocessExecutionError: If ``check`` is set and the exit status is non-zero.
    """

    command = _resolve_command(args)
    completed = subprocess.run(  # nosec B603
        command,
        check=False,
        capture_output=capture_output,
        text=True,
    )
    if check and completed.returncode != 0:
        raise SubprocessExecutionError(command, completed.returncode, completed.stdout, completed.stderr)
    return completed


__all__ = ["SubprocessExecutionError", "run_command"]
