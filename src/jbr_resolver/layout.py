# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform-specific knowledge about Java runtime installation layouts."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from .filesystem.probe import DEFAULT_PROBE, PathProbe
from .models import RuntimeExecutable, RuntimeHome
from .platform import OSFamily

JBR_PREFIX: Final[str] = "jbr"
MACOS_HOME_SEGMENTS: Final[tuple[str, str]] = ("Contents", "Home")
MACOS_JDK_DIR: Final[str] = "jdk"
JRE_DIR: Final[str] = "jre"
BIN_DIR: Final[str] = "bin"
JAVA_EXECUTABLE: Final[str] = "java"
WINDOWS_SUFFIX: Final[str] = ".exe"


class LayoutResolver:
    """Map installation roots to runtime homes and homes to executables.

    macOS application bundles nest the runtime under ``Contents/Home`` and may
    ship a JetBrains Runtime (``jbr*``) one level above it; other platforms use
    a flat layout.
    """

    def __init__(self, probe: PathProbe | None = None) -> None:
        self._probe = probe or DEFAULT_PROBE

    @property
    def probe(self) -> PathProbe:
        """Return the probe used to verify candidates."""

        return self._probe

    def home_candidate(self, root: Path, family: OSFamily) -> Path:
        """Return the runtime-home candidate for ``root`` without verifying it.

        Args:
            root: Installation root supplied by a candidate source.
            family: Operating-system family whose layout applies.

        Returns:
            Path: Directory expected to be the runtime home.
        """

        if family is OSFamily.MACOS:
            if root.parts[-2:] == MACOS_HOME_SEGMENTS:
                return root
            jbr = self._probe.find_child_with_prefix(root, JBR_PREFIX)
            if jbr is not None:
                return jbr.joinpath(*MACOS_HOME_SEGMENTS)
            return root.joinpath(MACOS_JDK_DIR, *MACOS_HOME_SEGMENTS)

        jbr = self._probe.find_child_with_prefix(root, JBR_PREFIX)
        return jbr if jbr is not None else root

    def resolve_home(self, root: Path, family: OSFamily) -> RuntimeHome | None:
        """Return the verified runtime home below ``root``.

        Args:
            root: Installation root supplied by a candidate source.
            family: Operating-system family whose layout applies.

        Returns:
            RuntimeHome | None: Home when the candidate exists, otherwise ``None``.
        """

        candidate = self.home_candidate(Path(root), family)
        if not self._probe.exists(candidate):
            return None
        return RuntimeHome(path=candidate)

    def executable_candidate(self, home: RuntimeHome, family: OSFamily) -> Path:
        """Return the expected ``java`` path inside ``home`` without verifying it."""

        jre = home.path / JRE_DIR
        base = jre if self._probe.exists(jre) else home.path
        return base / BIN_DIR / executable_name(family)

    def resolve_executable(self, home: RuntimeHome, family: OSFamily) -> RuntimeExecutable | None:
        """Return the verified ``java`` executable inside ``home``.

        Args:
            home: Verified runtime home.
            family: Operating-system family deciding the executable name.

        Returns:
            RuntimeExecutable | None: Executable when present, otherwise ``None``.
        """

        candidate = self.executable_candidate(home, family)
        if not self._probe.exists(candidate):
            return None
        return RuntimeExecutable(path=candidate, home=home)


def executable_name(family: OSFamily) -> str:
    """Return the ``java`` binary name for ``family``."""

    return JAVA_EXECUTABLE + (WINDOWS_SUFFIX if family is OSFamily.WINDOWS else "")


__all__ = [
    "JBR_PREFIX",
    "LayoutResolver",
    "executable_name",
]
