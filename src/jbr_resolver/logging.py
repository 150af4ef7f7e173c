# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic trace logging and user-facing console messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

from .console import detect_tty, get_console

CATEGORY_PREFIX = "jbr-resolver"
PACKAGE_LOGGER = "jbr_resolver"


def log_category(context: str | None = None) -> str:
    """Return the bracketed category used to prefix trace messages.

    Args:
        context: Optional caller-supplied label, e.g. a task or project name.

    Returns:
        str: Category such as ``"[jbr-resolver :app:runIde]"``.
    """

    category = f"{CATEGORY_PREFIX} {context or ''}".strip()
    return f"[{category}]"


@dataclass(slots=True)
class TraceLogger:
    """Stdlib logger adapter that prefixes messages with a log category."""

    logger: logging.Logger
    context: str | None = None
    _prefix: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self._prefix = log_category(self.context)

    def debug(self, message: str) -> None:
        self.logger.debug("%s %s", self._prefix, message)

    def info(self, message: str) -> None:
        self.logger.info("%s %s", self._prefix, message)

    def warning(self, message: str) -> None:
        self.logger.warning("%s %s", self._prefix, message)


def configure_logging(*, verbose: bool, use_color: bool | None = None) -> None:
    """Route the resolver trace to a Rich handler on standard error.

    Args:
        verbose: ``True`` to emit DEBUG trace lines, otherwise WARNING and above.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=False, stderr=True)
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=console, show_path=False, show_time=False, markup=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks."""

    console = get_console(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "TraceLogger",
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "log_category",
    "ok",
    "section",
    "warn",
]
