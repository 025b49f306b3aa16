# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .run import setup_command
from .versions import resolve_command, versions_command

app = typer.Typer(
    help="Provision GHC, Cabal and Stack on CI runners.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("run")(setup_command)
app.command("resolve")(resolve_command)
app.command("versions")(versions_command)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
