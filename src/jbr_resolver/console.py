# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by the CLI and the trace handler."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import TextIO

from rich.console import Console


@dataclass(frozen=True, slots=True)
class ConsoleStyle:
    """Presentation flags identifying a cached console."""

    color: bool
    emoji: bool
    stderr: bool = False


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal."""

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _build_console(style: ConsoleStyle, tty: bool) -> Console:
    colorful = style.color and tty
    return Console(
        color_system="auto" if colorful else None,
        force_terminal=tty,
        no_color=not colorful,
        emoji=style.emoji,
        soft_wrap=True,
        stderr=style.stderr,
    )


def get_console(*, color: bool, emoji: bool, stderr: bool = False) -> Console:
    """Return a console for the requested presentation flags.

    Consoles are cached per style and per terminal state of the target
    stream, so repeated calls reuse one instance.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.
        stderr: ``True`` to write to standard error instead of stdout.

    Returns:
        Console: Shared console writing to the selected stream.
    """

    tty = detect_tty(sys.stderr if stderr else sys.stdout)
    return _build_console(ConsoleStyle(color=color, emoji=emoji, stderr=stderr), tty)


def reset_consoles() -> None:
    """Drop cached consoles so the next call observes the current environment."""

    _build_console.cache_clear()


__all__ = ["ConsoleStyle", "detect_tty", "get_console", "reset_consoles"]
