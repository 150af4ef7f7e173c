# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Executable resolution strategies."""

from __future__ import annotations

from .base import ExecutableResolver
from .runtime import RuntimeResolver
from .sources import (
    BundledRuntimeSource,
    CandidateSource,
    CurrentRuntimeSource,
    ExplicitRuntimeSource,
    ToolchainLanguageSource,
    ToolchainVendorSource,
    current_java_home,
    default_sources,
    single_or_none,
)

__all__ = [
    "BundledRuntimeSource",
    "CandidateSource",
    "CurrentRuntimeSource",
    "ExecutableResolver",
    "ExplicitRuntimeSource",
    "RuntimeResolver",
    "ToolchainLanguageSource",
    "ToolchainVendorSource",
    "current_java_home",
    "default_sources",
    "single_or_none",
]
