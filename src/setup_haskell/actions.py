# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitHub Actions integration: workflow commands, outputs and PATH registration."""

from __future__ import annotations

import os
import uuid
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from pathlib import Path
from typing import Final

from .environment import EnvironmentContext
from .logging import fail, info, ok, section, warn

STOP_COMMANDS_TOKEN: Final[str] = "SetupHaskellStopCommands"


def _gha_escape(s: str) -> str:
    return s.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _append_line(path: Path, line: str) -> None:
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{line}\n")


def _key_value_entry(name: str, value: str) -> str:
    """Return a ``GITHUB_OUTPUT``/``GITHUB_ENV`` entry, using a heredoc for multi-line values."""

    if "\n" not in value:
        return f"{name}={value}"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}"


class ActionsRuntime:
    """Surface informational events and state changes to the CI runner.

    PATH additions, outputs and exported variables are applied to ``environ``
    for the rest of this process and written to the runner's command files so
    later workflow steps observe them too.
    """

    def __init__(
        self,
        context: EnvironmentContext,
        *,
        environ: MutableMapping[str, str] | None = None,
        use_emoji: bool = True,
    ) -> None:
        self._context = context
        self._environ = os.environ if environ is None else environ
        self.use_emoji = use_emoji
        self.registered_paths: list[Path] = []
        self.outputs: dict[str, str] = {}

    @property
    def context(self) -> EnvironmentContext:
        return self._context

    # ------------------------------------------------------------------
    # Messages

    def info(self, message: str) -> None:
        info(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        ok(message, use_emoji=self.use_emoji)

    def warning(self, message: str) -> None:
        """Emit a warning annotation (or a console warning outside Actions)."""

        if self._context.in_actions:
            print(f"::warning::{_gha_escape(message)}", flush=True)
            return
        warn(message, use_emoji=self.use_emoji)

    def error(self, message: str) -> None:
        """Emit an error annotation (or a console failure outside Actions)."""

        if self._context.in_actions:
            print(f"::error::{_gha_escape(message)}", flush=True)
            return
        fail(message, use_emoji=self.use_emoji)

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Fold the output produced inside the block under ``title``."""

        if self._context.in_actions:
            print(f"::group::{title}", flush=True)
            try:
                yield
            finally:
                print("::endgroup::", flush=True)
            return
        section(title, use_color=False)
        yield

    @contextmanager
    def stop_commands(self) -> Iterator[None]:
        """Ignore workflow commands printed by child processes inside the block."""

        print(f"::stop-commands::{STOP_COMMANDS_TOKEN}", flush=True)
        try:
            yield
        finally:
            print(f"::{STOP_COMMANDS_TOKEN}::", flush=True)

    # ------------------------------------------------------------------
    # State changes

    def add_path(self, path: Path) -> None:
        """Prepend ``path`` to the executable search path for this and later steps."""

        entry = str(path)
        if self._context.github_path_file is not None:
            _append_line(self._context.github_path_file, entry)
        current = self._environ.get("PATH", "")
        self._environ["PATH"] = f"{entry}{os.pathsep}{current}" if current else entry
        self.registered_paths.append(path)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        if self._context.github_output_file is not None:
            _append_line(self._context.github_output_file, _key_value_entry(name, value))

    def export_variable(self, name: str, value: str) -> None:
        self._environ[name] = value
        if self._context.github_env_file is not None:
            _append_line(self._context.github_env_file, _key_value_entry(name, value))


__all__ = ["ActionsRuntime", "STOP_COMMANDS_TOKEN"]
