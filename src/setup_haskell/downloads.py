# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Download and archive extraction helpers for installer artefacts."""

from __future__ import annotations

import stat
import tarfile
import uuid
from pathlib import Path
from typing import Final

import requests

DOWNLOAD_TIMEOUT: Final[int] = 60
CHUNK_SIZE: Final[int] = 1 << 16


def _filename_from_url(url: str) -> str:
    """Return the final path component of ``url``."""

    return url.rstrip("/").split("/")[-1]


def download_file(url: str, dest_dir: Path, *, timeout: int = DOWNLOAD_TIMEOUT) -> Path:
    """Download ``url`` into a fresh subdirectory of ``dest_dir``.

    Args:
        url: Artefact location.
        dest_dir: Scratch directory receiving the download.
        timeout: Connect/read timeout in seconds for each socket operation.

    Returns:
        Path: Location of the downloaded file.

    Raises:
        requests.RequestException: When the request fails or returns an error status.
    """

    target_dir = dest_dir / str(uuid.uuid4())
    target_dir.mkdir(parents=True, exist_ok=True)
    destination = target_dir / _filename_from_url(url)
    with requests.get(url, stream=True, timeout=timeout) as response:
        response.raise_for_status()
        with destination.open("wb") as handle:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                handle.write(chunk)
    return destination


def extract_tar(archive: Path, dest_dir: Path) -> Path:
    """Extract the gzipped tarball ``archive`` into a fresh directory.

    Returns:
        Path: Directory containing the extracted members.

    Raises:
        tarfile.TarError: If the archive is corrupt or uses unsafe members.
    """

    target = dest_dir / str(uuid.uuid4())
    target.mkdir(parents=True, exist_ok=True)
    with tarfile.open(archive, "r:*") as handle:
        handle.extractall(target, filter="data")
    return target


def make_executable(path: Path) -> None:
    """Set executable permissions on ``path`` for user/group/other."""

    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


__all__ = ["download_file", "extract_tar", "make_executable"]
