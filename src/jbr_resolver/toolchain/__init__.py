# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Toolchain specifications and lookup services."""

from __future__ import annotations

from .service import (
    InstalledToolchains,
    ToolchainInstallation,
    ToolchainService,
    default_toolchain_search_paths,
    read_release_file,
)
from .spec import ANY_VENDOR, JETBRAINS_RUNTIME_VENDOR, ToolchainSpec
from .versioning import JavaVersionParser

__all__ = [
    "ANY_VENDOR",
    "InstalledToolchains",
    "JETBRAINS_RUNTIME_VENDOR",
    "JavaVersionParser",
    "ToolchainInstallation",
    "ToolchainService",
    "ToolchainSpec",
    "default_toolchain_search_paths",
    "read_release_file",
]
