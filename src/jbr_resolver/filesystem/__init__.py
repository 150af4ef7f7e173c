# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers."""

from __future__ import annotations

from .probe import DEFAULT_PROBE, PathProbe

__all__ = ["DEFAULT_PROBE", "PathProbe"]
