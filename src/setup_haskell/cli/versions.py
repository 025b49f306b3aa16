# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalog inspection commands: ``resolve`` and ``versions``."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import box
from rich.table import Table

from ..catalog import Catalog, load_catalog
from ..console import detect_tty, get_console_manager
from ..errors import EmptyCatalog
from ..logging import fail, warn
from ..models import INSTALL_ORDER, Tool
from ..versioning import resolve_spec

CATALOG_OPTION = typer.Option(None, "--catalog", help="JSON catalog overriding the bundled supported versions.")


def build_versions_table(catalog: Catalog, tools: tuple[Tool, ...]) -> Table:
    """Return a rich table listing defaults and supported versions per tool."""

    table = Table(title="Supported versions", box=box.SIMPLE)
    table.add_column("Tool", style="bold")
    table.add_column("Default")
    table.add_column("Supported", overflow="fold")
    for tool in tools:
        entry = catalog.for_tool(tool)
        table.add_row(tool.value, entry.default, ", ".join(entry.supported) or "-")
    return table


def resolve_command(
    tool: Tool = typer.Argument(..., help="Tool whose catalog is consulted."),
    spec: str = typer.Argument(..., help="Exact version, dotted prefix or 'latest'."),
    catalog_path: Path | None = CATALOG_OPTION,
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in CLI output."),
) -> None:
    """Print the version that SPEC resolves to for TOOL."""

    catalog = load_catalog(catalog_path)
    try:
        resolution = resolve_spec(spec, catalog.for_tool(tool).supported, tool=tool)
    except EmptyCatalog as exc:
        fail(str(exc), use_emoji=emoji)
        raise typer.Exit(code=1) from exc
    if resolution.fallback is not None:
        warn(resolution.fallback.describe(), use_emoji=emoji)
    typer.echo(resolution.version)


def versions_command(
    tool: Tool | None = typer.Argument(None, help="Limit the listing to one tool."),
    catalog_path: Path | None = CATALOG_OPTION,
) -> None:
    """List default and supported versions from the catalog."""

    catalog = load_catalog(catalog_path)
    tools = (tool,) if tool is not None else INSTALL_ORDER
    console = get_console_manager().get(color=detect_tty(), emoji=False)
    console.print(build_versions_table(catalog, tools))


__all__ = ["build_versions_table", "resolve_command", "versions_command"]
