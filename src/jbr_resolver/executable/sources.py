# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Candidate sources producing installation roots for the runtime chain."""

from __future__ import annotations

import logging
import os
import shutil
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Final

from ..errors import ToolchainNotFoundError
from ..layout import JRE_DIR
from ..toolchain.service import ToolchainService
from ..toolchain.spec import ToolchainSpec

LOGGER = logging.getLogger(__name__)

JAVA_HOME_ENV: Final[str] = "JAVA_HOME"

_Pathish = str | PathLike[str] | Path
RuntimeProvider = Callable[[], "Path | None"]


def single_or_none(paths: Sequence[_Pathish]) -> Path | None:
    """Return the only non-empty entry of ``paths``.

    Args:
        paths: Configured distribution roots.

    Returns:
        Path | None: The entry when exactly one non-empty root is configured;
        ``None`` for zero or several roots.
    """

    entries = _non_empty(paths)
    if len(entries) != 1:
        return None
    return Path(entries[0])


def _non_empty(paths: Sequence[_Pathish]) -> list[_Pathish]:
    return [entry for entry in paths if str(entry).strip()]


def _describe_cardinality(paths: Sequence[_Pathish], noun: str) -> str:
    entries = _non_empty(paths)
    if not entries:
        return f"no {noun} configured"
    return f"{len(entries)} {noun}s configured, expected at most one"


def current_java_home(
    env: Mapping[str, str] | None = None,
    which: Callable[[str], str | None] | None = None,
) -> Path | None:
    """Return the home of the Java runtime visible to the current process.

    ``JAVA_HOME`` wins when it names an existing directory; otherwise the
    ``java`` found on ``PATH`` is resolved through symlinks and its ``bin``
    (and ``jre``) parents are stripped.

    Args:
        env: Environment mapping, defaults to :data:`os.environ`.
        which: Executable lookup, defaults to :func:`shutil.which`.

    Returns:
        Path | None: Runtime home, or ``None`` when no Java runtime is visible.
    """

    environment = os.environ if env is None else env
    java_home = environment.get(JAVA_HOME_ENV, "").strip()
    if java_home:
        candidate = Path(java_home).expanduser()
        if candidate.is_dir():
            return candidate
        LOGGER.debug("Ignoring %s=%s: not a directory", JAVA_HOME_ENV, java_home)
    java = (which or shutil.which)("java")
    if not java:
        return None
    home = Path(java).resolve().parent.parent
    if home.name == JRE_DIR:
        home = home.parent
    return home


class CandidateSource(ABC):
    """Lazily evaluated producer of an optional installation root."""

    label: str

    @abstractmethod
    def root(self) -> Path | None:
        """Return the installation root, or ``None`` when preconditions are unmet.

        Raises:
            Exception: Collaborator failures propagate to the chain, which
                records them as failed attempts.
        """

        raise NotImplementedError

    def skip_reason(self) -> str:
        """Return why :meth:`root` produced no candidate."""

        return "not configured"

    @property
    def misconfigured(self) -> bool:
        """Return ``True`` when the source was configured in a way it cannot honour."""

        return False


@dataclass(frozen=True, slots=True)
class ExplicitRuntimeSource(CandidateSource):
    """Runtime distribution supplied explicitly by the caller."""

    paths: tuple[_Pathish, ...] = ()
    label: str = field(default="JetBrains Runtime specified with dependencies")

    def root(self) -> Path | None:
        return single_or_none(self.paths)

    def skip_reason(self) -> str:
        return _describe_cardinality(self.paths, "runtime distribution")

    @property
    def misconfigured(self) -> bool:
        return len(_non_empty(self.paths)) > 1


@dataclass(frozen=True, slots=True)
class ToolchainVendorSource(CandidateSource):
    """Toolchain whose vendor constraint selects the JetBrains Runtime."""

    spec: ToolchainSpec | None = None
    service: ToolchainService | None = None
    label: str = field(default="JetBrains Runtime specified with Java Toolchain")

    def root(self) -> Path | None:
        if self.spec is None or self.service is None or not self.spec.requests_jetbrains_runtime():
            return None
        return _lookup(self.service, self.spec)

    def skip_reason(self) -> str:
        if self.service is None:
            return "no toolchain service available"
        if self.spec is None or not self.spec.has_vendor_constraint:
            return "toolchain specifies no vendor"
        return f"toolchain vendor '{self.spec.vendor}' does not match JetBrains"


@dataclass(frozen=True, slots=True)
class BundledRuntimeSource(CandidateSource):
    """Runtime shipped inside the platform distribution."""

    paths: tuple[_Pathish, ...] = ()
    label: str = field(default="JetBrains Runtime bundled within IntelliJ Platform")

    def root(self) -> Path | None:
        return single_or_none(self.paths)

    def skip_reason(self) -> str:
        return _describe_cardinality(self.paths, "platform distribution")

    @property
    def misconfigured(self) -> bool:
        return len(_non_empty(self.paths)) > 1


@dataclass(frozen=True, slots=True)
class ToolchainLanguageSource(CandidateSource):
    """Toolchain constrained by language version only."""

    spec: ToolchainSpec | None = None
    service: ToolchainService | None = None
    label: str = field(default="Java Runtime specified with Java Toolchain")

    def root(self) -> Path | None:
        if self.spec is None or self.service is None or self.spec.language_version is None:
            return None
        return _lookup(self.service, self.spec)

    def skip_reason(self) -> str:
        if self.service is None:
            return "no toolchain service available"
        return "toolchain specifies no language version"


@dataclass(frozen=True, slots=True)
class CurrentRuntimeSource(CandidateSource):
    """Java runtime of the current environment."""

    provider: RuntimeProvider = current_java_home
    label: str = field(default="current Java runtime")

    def root(self) -> Path | None:
        return self.provider()

    def skip_reason(self) -> str:
        return "no Java runtime visible to the current process"


def _lookup(service: ToolchainService, spec: ToolchainSpec) -> Path:
    installation = service.installation_path(spec)
    if installation is None or not str(installation).strip():
        raise ToolchainNotFoundError(f"Toolchain service returned no installation for {spec.describe()}")
    return Path(installation)


def default_sources(
    *,
    runtime_dirs: Sequence[_Pathish] = (),
    platform_dirs: Sequence[_Pathish] = (),
    toolchain_spec: ToolchainSpec | None = None,
    toolchain_service: ToolchainService | None = None,
    current_runtime: RuntimeProvider = current_java_home,
) -> tuple[CandidateSource, ...]:
    """Return the candidate sources in resolution priority order."""

    return (
        ExplicitRuntimeSource(paths=tuple(runtime_dirs)),
        ToolchainVendorSource(spec=toolchain_spec, service=toolchain_service),
        BundledRuntimeSource(paths=tuple(platform_dirs)),
        ToolchainLanguageSource(spec=toolchain_spec, service=toolchain_service),
        CurrentRuntimeSource(provider=current_runtime),
    )


__all__ = [
    "BundledRuntimeSource",
    "CandidateSource",
    "CurrentRuntimeSource",
    "ExplicitRuntimeSource",
    "ToolchainLanguageSource",
    "ToolchainVendorSource",
    "current_java_home",
    "default_sources",
    "single_or_none",
]
