# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Supported-version catalog shipped with the package."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .models import Tool

CATALOG_PATH: Final[Path] = Path(__file__).resolve().parent / "data" / "versions.json"


class ToolVersions(BaseModel):
    """Default version and supported versions (most recent first) for one tool."""

    model_config = ConfigDict(frozen=True)

    default: str
    supported: tuple[str, ...] = Field(default_factory=tuple)


class Catalog(BaseModel):
    """Read-only mapping from tool to its supported versions."""

    model_config = ConfigDict(frozen=True)

    ghc: ToolVersions
    cabal: ToolVersions
    stack: ToolVersions

    def for_tool(self, tool: Tool) -> ToolVersions:
        """Return the catalog entry for ``tool``."""

        entry: ToolVersions = getattr(self, tool.value)
        return entry


def load_catalog(path: Path | None = None) -> Catalog:
    """Load and validate the catalog stored at ``path``.

    Args:
        path: Optional JSON file overriding the bundled catalog.

    Returns:
        Catalog: Validated catalog model.
    """

    source = CATALOG_PATH if path is None else path
    payload = json.loads(source.read_text(encoding="utf-8"))
    return Catalog.model_validate(payload)


__all__ = ["CATALOG_PATH", "Catalog", "ToolVersions", "load_catalog"]
