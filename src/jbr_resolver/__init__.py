# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deterministic Java runtime resolution for IntelliJ Platform tooling."""

from __future__ import annotations

from .bundled import bundled_runtime_build
from .config import ResolverConfig, load_config
from .errors import ConfigError, ResolverError, RuntimeNotResolvedError, ToolchainNotFoundError
from .executable import ExecutableResolver, RuntimeResolver
from .filesystem import PathProbe
from .layout import LayoutResolver
from .models import (
    AttemptOutcome,
    ResolutionAttempt,
    ResolutionResult,
    ResolutionState,
    RuntimeExecutable,
    RuntimeHome,
)
from .platform import OSFamily, detect_os_family
from .toolchain import InstalledToolchains, ToolchainService, ToolchainSpec

__all__ = [
    "AttemptOutcome",
    "ConfigError",
    "ExecutableResolver",
    "InstalledToolchains",
    "LayoutResolver",
    "OSFamily",
    "PathProbe",
    "ResolutionAttempt",
    "ResolutionResult",
    "ResolutionState",
    "ResolverConfig",
    "ResolverError",
    "RuntimeExecutable",
    "RuntimeHome",
    "RuntimeNotResolvedError",
    "RuntimeResolver",
    "ToolchainNotFoundError",
    "ToolchainService",
    "ToolchainSpec",
    "bundled_runtime_build",
    "detect_os_family",
    "load_config",
]
