# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect existing toolchain installations and register them with the runner."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .actions import ActionsRuntime
from .environment import EnvironmentContext
from .models import InstallLocation, Platform, Tool
from .process_utils import run_command
from .tool_cache import ToolCache

CACHE_SOURCE: Final[str] = "cache"

PathProbe = Callable[[Tool, str, EnvironmentContext], Path | None]


def major_minor(version: str) -> str:
    """Return the first two dotted components of ``version``."""

    return ".".join(version.split(".")[:2])


def apt_path(tool: Tool, version: str, context: EnvironmentContext) -> Path:
    """Return where the hvr PPA packages install ``tool``."""

    folder = major_minor(version) if tool is Tool.CABAL else version
    return context.opt_root / tool.value / folder / "bin"


def ghcup_path(tool: Tool, version: str, context: EnvironmentContext) -> Path:
    """Return where ghcup places ``tool``; compilers get a directory per version."""

    if tool is Tool.GHC:
        return context.ghcup_root / "ghc" / version / "bin"
    return context.ghcup_root / "bin"


def choco_path(tool: Tool, version: str, context: EnvironmentContext) -> Path | None:
    """Return the Chocolatey package directory holding ``tool``.

    GHC packages carry a fourth, package-revision component that is not part
    of the directory name.
    """

    if context.chocolatey_root is None:
        return None
    tools_dir = context.chocolatey_root / "lib" / f"{tool.value}.{version}" / "tools"
    if tool is Tool.GHC:
        parts = version.split(".")
        path_version = ".".join(parts[:-1]) if len(parts) > 3 else version
        return tools_dir / f"ghc-{path_version}" / "bin"
    return tools_dir / f"{tool.value}-{version}"


PROBE_SOURCES: Final[dict[PathProbe, str]] = {
    apt_path: "apt",
    ghcup_path: "ghcup",
    choco_path: "chocolatey",
}

CONVENTIONAL_PROBES: Final[dict[tuple[Tool, Platform], tuple[PathProbe, ...]]] = {
    (Tool.GHC, Platform.LINUX): (apt_path, ghcup_path),
    (Tool.GHC, Platform.DARWIN): (ghcup_path,),
    (Tool.GHC, Platform.WIN32): (choco_path,),
    (Tool.CABAL, Platform.LINUX): (apt_path, ghcup_path),
    (Tool.CABAL, Platform.DARWIN): (ghcup_path,),
    (Tool.CABAL, Platform.WIN32): (choco_path,),
    (Tool.STACK, Platform.LINUX): (),
    (Tool.STACK, Platform.DARWIN): (),
    (Tool.STACK, Platform.WIN32): (),
}

# Directories holding whichever version was installed last; the executable has
# to report the requested version before the directory counts.
SHARED_DIRECTORIES: Final[frozenset[tuple[PathProbe, Tool]]] = frozenset({(ghcup_path, Tool.CABAL)})


@dataclass(frozen=True, slots=True)
class ProbeCandidate:
    """Directory that may hold ``tool``, tagged with the probe that produced it."""

    source: str
    directory: Path
    shared: bool = False


def conventional_paths(
    tool: Tool,
    version: str,
    platform: Platform,
    context: EnvironmentContext,
) -> tuple[ProbeCandidate, ...]:
    """Return the candidate directories for ``tool`` in declared order."""

    candidates: list[ProbeCandidate] = []
    for probe in CONVENTIONAL_PROBES[(tool, platform)]:
        directory = probe(tool, version, context)
        if directory is not None:
            shared = (probe, tool) in SHARED_DIRECTORIES
            candidates.append(ProbeCandidate(PROBE_SOURCES[probe], directory, shared))
    return tuple(candidates)


def resolve_executable(tool: Tool, directory: Path) -> Path | None:
    """Return the tool executable inside ``directory`` when it can be run."""

    if not directory.is_dir():
        return None
    found = shutil.which(tool.executable, path=str(directory))
    return Path(found) if found else None


def reported_version(executable: Path) -> str | None:
    """Return what ``<executable> --numeric-version`` prints, or ``None`` if it fails."""

    try:
        completed = run_command([str(executable), "--numeric-version"], capture_output=True, check=False)
    except OSError:
        return None
    if completed.returncode != 0:
        return None
    return (completed.stdout or "").strip() or None


class InstalledCheck:
    """Probe the cache store and conventional locations for a usable install."""

    def __init__(
        self,
        *,
        context: EnvironmentContext,
        cache: ToolCache,
        runtime: ActionsRuntime,
        platform: Platform,
    ) -> None:
        self._context = context
        self._cache = cache
        self._runtime = runtime
        self._platform = platform

    @property
    def platform(self) -> Platform:
        return self._platform

    def locate(self, tool: Tool, version: str) -> InstallLocation | None:
        """Return the first verified location without registering it."""

        cached = self._cache.find(tool.value, version)
        if cached is not None:
            for directory in (cached / "bin", cached):
                executable = resolve_executable(tool, directory)
                if executable is not None:
                    return InstallLocation(tool, version, directory, executable, CACHE_SOURCE)

        for candidate in conventional_paths(tool, version, self._platform, self._context):
            executable = resolve_executable(tool, candidate.directory)
            if executable is None:
                continue
            if candidate.shared and reported_version(executable) != version:
                continue
            return InstallLocation(tool, version, candidate.directory, executable, candidate.source)
        return None

    def find(self, tool: Tool, version: str) -> InstallLocation | None:
        """Return and register a verified installation of ``tool`` at ``version``.

        A directory only counts once the tool's executable resolves inside
        it; the PATH is updated after that check and never before. A directory
        shared by every version of the tool also has to report ``version``.
        """

        location = self.locate(tool, version)
        if location is None:
            return None
        self._runtime.add_path(location.path)
        self._runtime.set_output(f"{tool}-path", str(location.path))
        self._runtime.set_output(f"{tool}-exe", str(location.executable))
        self._runtime.info(f"Found {tool} {version} in {location.source} at path {location.path}. Setup successful.")
        return location


__all__ = [
    "CONVENTIONAL_PROBES",
    "InstalledCheck",
    "ProbeCandidate",
    "SHARED_DIRECTORIES",
    "apt_path",
    "choco_path",
    "conventional_paths",
    "ghcup_path",
    "major_minor",
    "reported_version",
    "resolve_executable",
]
