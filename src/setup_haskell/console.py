# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared rich consoles for setup output."""

from __future__ import annotations

import sys
from functools import cache
from typing import Literal

from rich.console import Console

ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


def detect_tty() -> bool:
    """Return whether stdout is a terminal; CI logs usually are not."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """One console per colour/emoji combination, reused across log calls."""

    def __init__(self) -> None:
        self._consoles: dict[tuple[bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        tty = detect_tty()
        key = (color, emoji, tty)
        console = self._consoles.get(key)
        if console is None:
            styled = color and tty
            color_system: ColorSystem | None = "auto" if styled else None
            # soft_wrap keeps long paths and workflow commands on one line.
            console = Console(
                color_system=color_system,
                force_terminal=tty,
                no_color=not styled,
                emoji=emoji,
                soft_wrap=True,
            )
            self._consoles[key] = console
        return console


@cache
def get_console_manager() -> RichConsoleManager:
    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
