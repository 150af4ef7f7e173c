# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Metadata about the runtime bundled inside a platform distribution."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Final

LOGGER = logging.getLogger(__name__)

DEPENDENCIES_FILE: Final[str] = "dependencies.txt"
BUILD_KEYS: Final[tuple[str, ...]] = ("runtimeBuild", "jdkBuild")
_WHITESPACE: Final[str] = " \t\f"
_SEPARATORS: Final[str] = "=:"
_COMMENT_MARKERS: Final[str] = "#!"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_ESCAPE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_ESCAPED_CHARS: Final[dict[str, str]] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java ``.properties`` content into a mapping.

    Follows ``java.util.Properties.load``: ``#``/``!`` comments, a key ending at
    the first unescaped ``=``, ``:`` or whitespace, at most one separator
    character, backslash line continuations and escape sequences.

    Args:
        text: Raw properties document.

    Returns:
        dict[str, str]: Keys mapped to their values; later keys win.
    """

    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def _logical_lines(text: str) -> Iterator[str]:
    pending: str | None = None
    for raw_line in _LINE_BREAK.split(text):
        line = raw_line.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in _COMMENT_MARKERS):
            continue
        # an odd run of trailing backslashes continues the line
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2:
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(text: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if len(token) == 5:
            return chr(int(token[1:], 16))
        return _ESCAPED_CHARS.get(token, token)

    return _ESCAPE.sub(_replace, text)


def bundled_runtime_build(platform_root: Path) -> str | None:
    """Return the runtime build shipped with a platform distribution.

    Args:
        platform_root: Root directory of the platform distribution.

    Returns:
        str | None: ``runtimeBuild`` (or legacy ``jdkBuild``) from
        ``dependencies.txt``; ``None`` when missing or unreadable.
    """

    dependencies = Path(platform_root) / DEPENDENCIES_FILE
    try:
        if not dependencies.is_file():
            return None
        properties = parse_properties(dependencies.read_text(encoding="utf-8", errors="replace"))
    except OSError as exc:
        LOGGER.debug("Unable to read %s: %s", dependencies, exc)
        return None
    for key in BUILD_KEYS:
        value = properties.get(key)
        if value:
            return value
    return None


__all__ = ["DEPENDENCIES_FILE", "bundled_runtime_build", "parse_properties"]
