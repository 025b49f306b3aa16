# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve user version specifiers against the supported-version catalog."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

from .catalog import Catalog
from .errors import EmptyCatalog
from .models import Tool

LATEST: Final[str] = "latest"


@dataclass(frozen=True, slots=True)
class ResolutionFallback:
    """Informational event: ``spec`` matched no catalog entry and is used verbatim."""

    tool: Tool | None
    spec: str

    def describe(self) -> str:
        label = f"{self.tool} " if self.tool is not None else ""
        return f"{label}{self.spec} is not in the list of supported versions; using it as given"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a specifier."""

    spec: str
    version: str
    fallback: ResolutionFallback | None = None


def resolve_spec(spec: str, supported: Sequence[str], *, tool: Tool | None = None) -> Resolution:
    """Resolve ``spec`` against ``supported`` (ordered most recent first).

    ``latest`` selects the first entry; otherwise the first entry starting
    with ``spec`` wins. When nothing matches, ``spec`` passes through
    unchanged and the result carries a :class:`ResolutionFallback`.

    Raises:
        EmptyCatalog: If ``latest`` is requested and ``supported`` is empty.
    """

    if spec == LATEST:
        if not supported:
            label = f" for {tool}" if tool is not None else ""
            raise EmptyCatalog(f"Cannot resolve 'latest'{label}: no supported versions are known")
        return Resolution(spec=spec, version=supported[0])
    for candidate in supported:
        if str(candidate).startswith(spec):
            return Resolution(spec=spec, version=str(candidate))
    return Resolution(spec=spec, version=spec, fallback=ResolutionFallback(tool=tool, spec=spec))


def resolve(spec: str, supported: Sequence[str]) -> str:
    """Return the canonical version chosen for ``spec``."""

    return resolve_spec(spec, supported).version


Reporter = Callable[[str], None]


class VersionResolver:
    """Resolve specifiers once per run and report each decision."""

    def __init__(self, catalog: Catalog, *, report: Reporter | None = None) -> None:
        self._catalog = catalog
        self._report = report or (lambda message: None)
        self._resolved: dict[tuple[Tool, str], Resolution] = {}

    def resolve(self, tool: Tool, spec: str) -> str:
        """Return the resolved version for ``spec``, reusing earlier decisions."""

        key = (tool, spec)
        cached = self._resolved.get(key)
        if cached is not None:
            return cached.version
        resolution = resolve_spec(spec, self._catalog.for_tool(tool).supported, tool=tool)
        self._resolved[key] = resolution
        if resolution.fallback is not None:
            self._report(resolution.fallback.describe())
        else:
            self._report(f"Resolved {tool} {spec} to {resolution.version}")
        return resolution.version


__all__ = [
    "LATEST",
    "Resolution",
    "ResolutionFallback",
    "VersionResolver",
    "resolve",
    "resolve_spec",
]
