# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the runtime resolver."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .models import ResolutionAttempt


class ResolverError(Exception):
    """Base class for errors raised by :mod:`jbr_resolver`."""


class ConfigError(ResolverError):
    """Raised when configuration input is invalid."""


class ToolchainNotFoundError(ResolverError):
    """Raised by toolchain services when no installation satisfies a spec."""


class RuntimeNotResolvedError(ResolverError):
    """Raised when a caller requires a runtime but the chain was exhausted."""

    def __init__(self, message: str, *, attempts: Sequence[ResolutionAttempt] = ()) -> None:
        """Initialise the error with the diagnostic trace of the failed resolution.

        Args:
            message: Human-readable summary of the failure.
            attempts: Ordered attempts recorded while resolving.
        """

        super().__init__(message)
        self.attempts = tuple(attempts)


__all__ = [
    "ConfigError",
    "ResolverError",
    "RuntimeNotResolvedError",
    "ToolchainNotFoundError",
]
