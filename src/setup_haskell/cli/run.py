# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``setup-haskell run`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ..actions import ActionsRuntime
from ..catalog import load_catalog
from ..config import ActionInputs
from ..environment import EnvironmentContext
from ..errors import SetupError
from ..models import Platform
from ..process_utils import SubprocessExecutionError
from ..runner import setup


def setup_command(
    ghc_version: str | None = typer.Option(
        None,
        "--ghc-version",
        help="GHC version or prefix to install (defaults to the ghc-version input).",
    ),
    cabal_version: str | None = typer.Option(
        None,
        "--cabal-version",
        help="Cabal version or prefix to install (defaults to the cabal-version input).",
    ),
    stack_version: str | None = typer.Option(
        None,
        "--stack-version",
        help="Stack version to install; stack is skipped when empty.",
    ),
    stack_no_global: bool = typer.Option(
        False,
        "--stack-no-global",
        help="Skip the global GHC and Cabal installs; stack manages the toolchain.",
    ),
    stack_setup_ghc: bool = typer.Option(
        False,
        "--stack-setup-ghc",
        help="Run 'stack setup' to pre-install GHC through stack.",
    ),
    platform: Platform | None = typer.Option(
        None,
        "--platform",
        help="Override the detected host platform.",
    ),
    catalog_path: Path | None = typer.Option(
        None,
        "--catalog",
        help="JSON catalog overriding the bundled supported versions.",
    ),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in CLI output."),
) -> None:
    """Install the requested Haskell toolchain and register it with the runner."""

    context = EnvironmentContext.from_environ()
    runtime = ActionsRuntime(context, use_emoji=emoji)
    inputs = ActionInputs.from_environ().with_overrides(
        ghc_version=ghc_version,
        cabal_version=cabal_version,
        stack_version=stack_version,
        stack_no_global=True if stack_no_global else None,
        stack_setup_ghc=True if stack_setup_ghc else None,
    )

    try:
        host = platform or Platform.current()
        setup(
            inputs,
            catalog=load_catalog(catalog_path),
            context=context,
            runtime=runtime,
            platform=host,
        )
    except SubprocessExecutionError as exc:
        runtime.error(str(exc))
        raise typer.Exit(code=exc.returncode or 1) from exc
    except (SetupError, FileNotFoundError, ValueError) as exc:
        runtime.error(str(exc))
        raise typer.Exit(code=1) from exc

    runtime.ok("Haskell environment ready.")


__all__ = ["setup_command"]
