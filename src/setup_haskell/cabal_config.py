# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Post-install configuration of cabal's user config."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from .actions import ActionsRuntime
from .errors import CabalConfigNotFound
from .models import Platform
from .process_utils import run_command

WINDOWS_STORE_DIR: Final[str] = "C:\\sr"
CABAL_STORE_OUTPUT: Final[str] = "cabal-store"


def cabal_config_path() -> Path:
    """Return the user config file named on the last line of ``cabal --help``.

    Raises:
        CabalConfigNotFound: If ``cabal --help`` printed nothing.
    """

    completed = run_command(["cabal", "--help"], capture_output=True, check=False)
    output = f"{completed.stdout or ''}\n{completed.stderr or ''}"
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        raise CabalConfigNotFound("cabal --help produced no output; cannot locate the config file")
    return Path(lines[-1])


def configure_cabal(
    *,
    runtime: ActionsRuntime,
    platform: Platform,
    home: Path,
    update_index: bool,
) -> Path:
    """Prepare cabal's user config for CI and publish the store location.

    Args:
        runtime: Runner integration receiving the ``cabal-store`` output.
        platform: Host platform; Windows uses a short store path.
        home: Home directory of the runner user.
        update_index: Whether to download the package index afterwards.

    Returns:
        Path: The cabal config file that was updated.
    """

    run_command(["cabal", "user-config", "update"], capture_output=True)
    config_file = cabal_config_path()
    runtime.info(f"the config file is: {config_file}")

    lines = ["http-transport: plain-http"]
    if platform is Platform.WIN32:
        lines.append(f"store-dir: {WINDOWS_STORE_DIR}")
        store = WINDOWS_STORE_DIR
    else:
        store = f"{home}/.cabal/store"
    with config_file.open("a", encoding="utf-8") as handle:
        for line in lines:
            handle.write(f"{line}\n")
    runtime.set_output(CABAL_STORE_OUTPUT, store)

    run_command(["cabal", "user-config", "update"])
    if update_index:
        run_command(["cabal", "update"])
    return config_file


__all__ = ["cabal_config_path", "configure_cabal"]
