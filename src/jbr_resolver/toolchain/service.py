# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Toolchain lookup services mapping a :class:`ToolchainSpec` to an installation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from packaging.version import Version

from ..errors import ToolchainNotFoundError
from ..layout import MACOS_HOME_SEGMENTS
from .spec import ToolchainSpec
from .versioning import JavaVersionParser

LOGGER = logging.getLogger(__name__)

RELEASE_FILE: Final[str] = "release"
IMPLEMENTOR_KEY: Final[str] = "IMPLEMENTOR"
JAVA_VERSION_KEY: Final[str] = "JAVA_VERSION"
_ZERO_VERSION: Final[Version] = Version("0")


@runtime_checkable
class ToolchainService(Protocol):
    """Resolve a toolchain specification to an installation directory."""

    def installation_path(self, spec: ToolchainSpec) -> Path:
        """Return the installation path for ``spec`` or raise when none matches."""

        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ToolchainInstallation:
    """Java installation discovered on disk."""

    home: Path
    vendor: str | None
    java_version: str | None
    language_version: int | None


def default_toolchain_search_paths() -> tuple[Path, ...]:
    """Return the conventional directories holding locally installed JDKs."""

    home = Path.home()
    return (
        home / ".gradle" / "jdks",
        home / ".jdks",
        Path("/usr/lib/jvm"),
        Path("/Library/Java/JavaVirtualMachines"),
    )


def read_release_file(path: Path) -> dict[str, str]:
    """Parse a JDK ``release`` file of ``KEY="value"`` lines.

    Args:
        path: Location of the ``release`` file.

    Returns:
        dict[str, str]: Parsed properties with surrounding quotes removed.
    """

    properties: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8", errors="replace").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        properties[key.strip()] = value.strip().strip('"')
    return properties


class InstalledToolchains(ToolchainService):
    """Read-only service selecting among JDKs already installed on disk.

    Each search path is treated both as an installation and as a directory of
    installations. The highest matching version wins; ties break on path.
    """

    def __init__(
        self,
        search_paths: Sequence[Path] | None = None,
        *,
        parser: JavaVersionParser | None = None,
    ) -> None:
        self._search_paths = tuple(search_paths) if search_paths is not None else default_toolchain_search_paths()
        self._parser = parser or JavaVersionParser()

    @property
    def search_paths(self) -> tuple[Path, ...]:
        return self._search_paths

    def installation_path(self, spec: ToolchainSpec) -> Path:
        """Return the home of the best installation matching ``spec``.

        Args:
            spec: Requested vendor and language constraints.

        Returns:
            Path: Runtime home of the selected installation.

        Raises:
            ToolchainNotFoundError: If no installation satisfies ``spec``.
        """

        matches = [install for install in self.installations() if self._matches(install, spec)]
        if not matches:
            searched = ", ".join(str(path) for path in self._search_paths) or "<none>"
            raise ToolchainNotFoundError(f"No installed toolchain matches {spec.describe()} (searched: {searched})")
        best = max(matches, key=self._sort_key)
        LOGGER.debug("Toolchain %s selected for %s", best.home, spec.describe())
        return best.home

    def installations(self) -> list[ToolchainInstallation]:
        """Return every installation found below the search paths."""

        seen: set[Path] = set()
        found: list[ToolchainInstallation] = []
        for candidate in self._iter_candidates(self._search_paths):
            installation = self._inspect(candidate)
            if installation is None or installation.home in seen:
                continue
            seen.add(installation.home)
            found.append(installation)
        return found

    def _matches(self, installation: ToolchainInstallation, spec: ToolchainSpec) -> bool:
        if not spec.matches_vendor(installation.vendor):
            return False
        if spec.language_version is None:
            return True
        return installation.language_version == spec.language_version

    def _sort_key(self, installation: ToolchainInstallation) -> tuple[Version, str]:
        version = self._parser.parse(installation.java_version) or _ZERO_VERSION
        return version, str(installation.home)

    @staticmethod
    def _iter_candidates(search_paths: Iterable[Path]) -> Iterator[Path]:
        for search_path in search_paths:
            yield search_path
            try:
                children = sorted(child for child in search_path.iterdir() if child.is_dir())
            except OSError:
                continue
            yield from children

    def _inspect(self, directory: Path) -> ToolchainInstallation | None:
        for home in (directory, directory.joinpath(*MACOS_HOME_SEGMENTS)):
            release = home / RELEASE_FILE
            try:
                if not release.is_file():
                    continue
                properties = read_release_file(release)
            except OSError as exc:
                LOGGER.debug("Unable to read %s: %s", release, exc)
                continue
            java_version = properties.get(JAVA_VERSION_KEY)
            return ToolchainInstallation(
                home=home,
                vendor=properties.get(IMPLEMENTOR_KEY),
                java_version=java_version,
                language_version=self._parser.language_version(java_version),
            )
        return None


__all__ = [
    "InstalledToolchains",
    "ToolchainInstallation",
    "ToolchainService",
    "default_toolchain_search_paths",
    "read_release_file",
]
