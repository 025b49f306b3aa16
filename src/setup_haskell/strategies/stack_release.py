# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install stack from its published release archives."""

from __future__ import annotations

from typing import Final

from packaging.version import InvalidVersion, Version

from ..downloads import download_file, extract_tar
from ..errors import StrategyFailed
from ..models import Platform, Tool
from ..versioning import LATEST
from .base import InstallStrategy

STATIC_LINUX_SINCE: Final[Version] = Version("2.3.1")
STABLE_NAMES: Final[dict[Platform, str]] = {
    Platform.LINUX: "linux",
    Platform.DARWIN: "osx",
    Platform.WIN32: "windows",
}
WINDOWS_STACK_ROOT: Final[str] = "C:\\sr"


def build_id(platform: Platform, version: str) -> str:
    """Return the release build identifier for ``platform``.

    Linux builds are statically linked from 2.3.1 onwards.

    Raises:
        StrategyFailed: If ``version`` cannot be compared on Linux.
    """

    if platform is Platform.LINUX:
        try:
            static = Version(version) >= STATIC_LINUX_SINCE
        except InvalidVersion as exc:
            raise StrategyFailed(f"cannot derive a stack build for version '{version}'") from exc
        return "linux-x86_64-static" if static else "linux-x86_64"
    return f"{STABLE_NAMES[platform]}-x86_64"


def release_url(platform: Platform, version: str) -> str:
    """Return the archive URL for ``version`` (or the rolling stable archive)."""

    if version == LATEST:
        return f"https://get.haskellstack.org/stable/{STABLE_NAMES[platform]}-x86_64.tar.gz"
    build = build_id(platform, version)
    return f"https://github.com/commercialhaskell/stack/releases/download/v{version}/stack-{version}-{build}.tar.gz"


class StackReleaseStrategy(InstallStrategy):
    """Download, unpack and cache the stack release archive."""

    name = "stack-release"
    supported = frozenset({(Tool.STACK, platform) for platform in Platform})

    def _install(self, tool: Tool, version: str, platform: Platform) -> None:
        archive = download_file(release_url(platform, version), self._context.temp_dir)
        extracted = extract_tar(archive, self._context.temp_dir)
        candidates = sorted(path for path in extracted.iterdir() if path.is_dir() and path.name.startswith("stack"))
        if len(candidates) != 1:
            raise StrategyFailed(f"expected one stack directory in {archive.name}, found {len(candidates)}")
        self._cache.cache_dir(candidates[0], tool.value, version)
        if platform is Platform.WIN32:
            self._runtime.export_variable("STACK_ROOT", WINDOWS_STACK_ROOT)


__all__ = ["StackReleaseStrategy", "build_id", "release_url"]
