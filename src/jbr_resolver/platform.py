# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Operating-system family detection."""

from __future__ import annotations

import platform
from enum import Enum
from functools import cache


class OSFamily(str, Enum):
    """Enumerate the platform families with distinct runtime layouts."""

    MACOS = "macos"
    WINDOWS = "windows"
    OTHER_UNIX = "other_unix"

    @classmethod
    def from_system(cls, system: str) -> OSFamily:
        """Return the family matching a ``platform.system()`` style name.

        Args:
            system: System name such as ``"Darwin"``, ``"Windows"`` or ``"Linux"``.

        Returns:
            OSFamily: Matching family; unknown names map to ``OTHER_UNIX``.
        """

        normalized = system.strip().lower()
        if normalized in {"darwin", "macos", "mac os x"}:
            return cls.MACOS
        if normalized.startswith(("windows", "win32", "cygwin", "msys")):
            return cls.WINDOWS
        return cls.OTHER_UNIX


@cache
def detect_os_family() -> OSFamily:
    """Return the family of the running process, computed once per process.

    Returns:
        OSFamily: Family derived from :func:`platform.system`.
    """

    return OSFamily.from_system(platform.system())


__all__ = ["OSFamily", "detect_os_family"]
